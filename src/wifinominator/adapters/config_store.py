"""In-memory saved network store."""

from __future__ import annotations

from typing import Iterable

from ..schemas import SavedConfiguration, ScanObservation


class InMemoryConfigurationStore:
    """Store matching observations to configurations by SSID and security."""

    def __init__(self, configurations: Iterable[SavedConfiguration] = ()) -> None:
        self._configurations: dict[int, SavedConfiguration] = {}
        for configuration in configurations:
            self.add(configuration)

    def add(self, configuration: SavedConfiguration) -> None:
        if configuration.network_id in self._configurations:
            raise ValueError(f"Duplicate network id: {configuration.network_id}")
        self._configurations[configuration.network_id] = configuration

    def get(self, network_id: int) -> SavedConfiguration | None:
        return self._configurations.get(network_id)

    def configurations(self) -> list[SavedConfiguration]:
        return list(self._configurations.values())

    def lookup(self, observation: ScanObservation) -> list[SavedConfiguration]:
        advertised = set(observation.security_types)
        return [
            configuration
            for configuration in self._configurations.values()
            if configuration.ssid == observation.ssid
            and configuration.security in advertised
        ]

    def __len__(self) -> int:
        return len(self._configurations)
