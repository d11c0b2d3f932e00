"\"\"\"Eligibility filters applied to every candidate pair.\"\"\""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Iterable

from .autojoin import AutojoinFilter
from .bssid import BssidPinFilter
from .ephemeral import EphemeralFilter
from .external_scores import ExternalScoresFilter
from .selection_status import SelectionStatusFilter
from .sim import SimAvailabilityFilter

if TYPE_CHECKING:
    from ...adapters import CarrierIdentityResolver

# Evaluation order of the default chain.
DEFAULT_FILTER_NAMES: tuple[str, ...] = (
    ExternalScoresFilter.name,
    EphemeralFilter.name,
    SimAvailabilityFilter.name,
    SelectionStatusFilter.name,
    BssidPinFilter.name,
    AutojoinFilter.name,
)

# Filters a configured chain may not drop.
REQUIRED_FILTER_NAMES: tuple[str, ...] = (
    ExternalScoresFilter.name,
    EphemeralFilter.name,
    SimAvailabilityFilter.name,
    AutojoinFilter.name,
)

_FACTORIES: dict[str, Callable[["CarrierIdentityResolver"], Any]] = {
    ExternalScoresFilter.name: lambda resolver: ExternalScoresFilter(),
    EphemeralFilter.name: lambda resolver: EphemeralFilter(),
    SimAvailabilityFilter.name: SimAvailabilityFilter,
    SelectionStatusFilter.name: lambda resolver: SelectionStatusFilter(),
    BssidPinFilter.name: lambda resolver: BssidPinFilter(),
    AutojoinFilter.name: lambda resolver: AutojoinFilter(),
}


def validate_filter_chain(names: Iterable[str]) -> list[str]:
    """Check a configured chain and return it as a list.

    Only the optional filters may be left out, and the required ones keep
    their default relative order.
    """
    selected = list(names)
    unknown = [name for name in selected if name not in _FACTORIES]
    if unknown:
        raise ValueError(f"Unknown filters: {unknown}")
    if len(set(selected)) != len(selected):
        raise ValueError(f"Duplicate filters in chain: {selected}")
    missing = [name for name in REQUIRED_FILTER_NAMES if name not in selected]
    if missing:
        raise ValueError(f"Required filters missing from chain: {missing}")
    required_order = [name for name in selected if name in REQUIRED_FILTER_NAMES]
    if required_order != list(REQUIRED_FILTER_NAMES):
        raise ValueError(
            f"Required filters must run in order {list(REQUIRED_FILTER_NAMES)}, got {required_order}"
        )
    return selected


def build_filters(
    resolver: "CarrierIdentityResolver",
    names: Iterable[str] | None = None,
) -> list[Any]:
    """Instantiate filters by name, in the order given."""
    selected = validate_filter_chain(names if names is not None else DEFAULT_FILTER_NAMES)
    return [_FACTORIES[name](resolver) for name in selected]


__all__ = [
    "DEFAULT_FILTER_NAMES",
    "REQUIRED_FILTER_NAMES",
    "AutojoinFilter",
    "BssidPinFilter",
    "EphemeralFilter",
    "ExternalScoresFilter",
    "SelectionStatusFilter",
    "SimAvailabilityFilter",
    "build_filters",
    "validate_filter_chain",
]
