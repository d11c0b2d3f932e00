"""Saved network configuration schema."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator

from .scan import SecurityType, strip_ssid_quotes

UNKNOWN_CARRIER_ID = -1
ANY_BSSID = "any"


class EapMethod(str, Enum):
    """EAP methods a saved enterprise network can authenticate with."""

    PEAP = "peap"
    TLS = "tls"
    TTLS = "ttls"
    PWD = "pwd"
    SIM = "sim"
    AKA = "aka"
    AKA_PRIME = "aka_prime"


SIM_EAP_METHODS = frozenset({EapMethod.SIM, EapMethod.AKA, EapMethod.AKA_PRIME})


class SavedConfiguration(BaseModel):
    """Persisted credential and policy record for one network.

    Instances are immutable; the configuration store owns every change.
    """

    network_id: int
    ssid: str
    security: SecurityType = SecurityType.OPEN
    bssid: str | None = None
    use_external_scores: bool = False
    ephemeral: bool = False
    passpoint: bool = False
    allow_autojoin: bool = True
    carrier_id: int = UNKNOWN_CARRIER_ID
    eap_method: EapMethod | None = None
    selection_enabled: bool = True

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("ssid")
    @classmethod
    def _unquote_ssid(cls, value: str) -> str:
        return strip_ssid_quotes(value)

    @property
    def requires_sim(self) -> bool:
        return (
            self.security in (SecurityType.EAP, SecurityType.EAP_SUITE_B)
            and self.eap_method in SIM_EAP_METHODS
        )

    @property
    def pinned_bssid(self) -> str | None:
        if self.bssid is None or self.bssid.lower() == ANY_BSSID:
            return None
        return self.bssid.lower()

    def describe(self) -> str:
        return f"{self.ssid}:{self.network_id}"
