"\"\"\"Pydantic schema definitions for scan and saved network data.\"\"\""

from __future__ import annotations

from .network import (
    UNKNOWN_CARRIER_ID,
    EapMethod,
    SavedConfiguration,
)
from .scan import ScanObservation, SecurityType, parse_security_types

__all__ = [
    "UNKNOWN_CARRIER_ID",
    "EapMethod",
    "SavedConfiguration",
    "ScanObservation",
    "SecurityType",
    "parse_security_types",
]
