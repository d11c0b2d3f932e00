from __future__ import annotations

import pytest
from pydantic import ValidationError

from wifinominator.adapters import InMemoryConfigurationStore
from wifinominator.container import create_container
from wifinominator.core import DEFAULT_FILTER_NAMES, REQUIRED_FILTER_NAMES, CandidateCollector
from wifinominator.schemas import SavedConfiguration, ScanObservation
from wifinominator.schemas.config import AppConfig, load_config

PINLESS_CHAIN = [
    "external_scores",
    "ephemeral",
    "sim_availability",
    "selection_status",
    "autojoin",
]


def test_default_container_builds_full_filter_chain():
    container = create_container()

    nominator = container.nominator()

    assert nominator.filter_names == list(DEFAULT_FILTER_NAMES)


def test_create_container_with_overrides():
    container = create_container(
        settings={
            "nominator": {"filters": list(REQUIRED_FILTER_NAMES)},
            "telephony": {
                "carrier_subscriptions": {100: 2},
                "default_data_subscription": 1,
                "present_subscriptions": [2],
            },
        }
    )

    resolver = container.carrier_resolver()
    store = InMemoryConfigurationStore([SavedConfiguration(network_id=1, ssid="home")])
    nominator = container.nominator(store=store)

    assert nominator.filter_names == list(REQUIRED_FILTER_NAMES)
    assert resolver.best_subscription_for(
        SavedConfiguration(network_id=1, ssid="x", carrier_id=100)
    ) == 2
    assert resolver.is_sim_present(2)
    assert nominator._store is store


def test_load_config_validation():
    data = {
        "nominator": {"filters": PINLESS_CHAIN},
        "telephony": {"present_subscriptions": [1]},
    }
    app_config = load_config(data)
    assert isinstance(app_config, AppConfig)
    settings = app_config.to_settings()
    assert settings["nominator"]["filters"] == PINLESS_CHAIN
    assert settings["telephony"]["present_subscriptions"] == [1]


def test_load_config_rejects_unknown_filters_and_non_mappings():
    with pytest.raises(ValidationError):
        load_config({"nominator": {"filters": ["signal_strength"]}})
    with pytest.raises(ValidationError):
        load_config(["not", "a", "mapping"])


def test_empty_config_produces_no_settings():
    assert load_config({}).to_settings() == {}


@pytest.mark.parametrize(
    "filters",
    [
        ["autojoin"],
        ["external_scores", "ephemeral", "selection_status", "autojoin"],
        ["autojoin", "ephemeral", "external_scores", "sim_availability"],
        ["ephemeral", "external_scores", "sim_availability", "autojoin"],
    ],
)
def test_load_config_rejects_missing_or_reordered_required_filters(filters):
    with pytest.raises(ValidationError):
        load_config({"nominator": {"filters": filters}})


def test_required_filters_still_reject_through_container():
    app_config = load_config({"nominator": {"filters": list(REQUIRED_FILTER_NAMES)}})
    container = create_container(settings=app_config.to_settings())
    store = InMemoryConfigurationStore(
        [SavedConfiguration(network_id=1, ssid="home", ephemeral=True, use_external_scores=True)]
    )
    observation = ScanObservation(
        ssid="home", bssid="6c:f3:7f:ae:8c:f3", level=-50, frequency=2437, capabilities="[ESS]"
    )
    collector = CandidateCollector()

    container.nominator(store=store).nominate([observation], collector)

    assert len(collector) == 0
