"""Scan observation schema."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator


class SecurityType(str, Enum):
    """Security types a network can advertise or be saved with."""

    OPEN = "open"
    OWE = "owe"
    WEP = "wep"
    PSK = "psk"
    SAE = "sae"
    EAP = "eap"
    EAP_SUITE_B = "eap_suite_b"


def strip_ssid_quotes(value: str) -> str:
    if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
        return value[1:-1]
    return value


def parse_security_types(capabilities: str) -> tuple[SecurityType, ...]:
    """Return the security types advertised by a capability string.

    WPA2/WPA3 transition networks advertise both PSK and SAE; an access point
    with no key management element is open.
    """
    caps = capabilities.upper()
    found: list[SecurityType] = []
    if "SUITE_B_192" in caps or "SUITE-B-192" in caps:
        found.append(SecurityType.EAP_SUITE_B)
    elif "EAP" in caps:
        found.append(SecurityType.EAP)
    if "PSK" in caps:
        found.append(SecurityType.PSK)
    if "SAE" in caps:
        found.append(SecurityType.SAE)
    if "OWE" in caps:
        found.append(SecurityType.OWE)
    if "WEP" in caps:
        found.append(SecurityType.WEP)
    if not found:
        found.append(SecurityType.OPEN)
    return tuple(found)


class ScanObservation(BaseModel):
    """One access point seen in one scan cycle."""

    ssid: str
    bssid: str
    level: int
    frequency: int
    capabilities: str = ""

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("ssid")
    @classmethod
    def _unquote_ssid(cls, value: str) -> str:
        return strip_ssid_quotes(value)

    @field_validator("bssid")
    @classmethod
    def _normalize_bssid(cls, value: str) -> str:
        return value.lower()

    @property
    def security_types(self) -> tuple[SecurityType, ...]:
        return parse_security_types(self.capabilities)

    @property
    def band(self) -> str:
        if 2400 <= self.frequency < 2500:
            return "2.4GHz"
        if 5925 <= self.frequency <= 7125:
            return "6GHz"
        if 4900 <= self.frequency < 5925:
            return "5GHz"
        return "unknown"
