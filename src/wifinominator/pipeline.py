"\"\"\"File driven nomination pipeline.\"\"\""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pendulum
import structlog
from pydantic import ValidationError

from .adapters import InMemoryConfigurationStore
from .core import CandidateCollector, CandidatePair, SavedNetworkNominator
from .schemas import SavedConfiguration, ScanObservation
from . import __version__

NominatorFactory = Callable[..., SavedNetworkNominator]


class RecordLoadError(ValueError):
    """Raised when an input file contains invalid records."""

    def __init__(self, errors: list[str], partial: list[Any]):
        super().__init__("Record loading failed")
        self.errors = errors
        self.partial = partial

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"Record loading failed: {self.errors}"


class ScanLoader:
    """Load scan observations from JSONL, one access point per line."""

    def load(self, path: Path) -> list[ScanObservation]:
        observations: list[ScanObservation] = []
        errors: list[str] = []
        with path.open("r", encoding="utf-8") as handle:
            for idx, line in enumerate(handle, start=1):
                raw = line.strip()
                if not raw:
                    continue
                try:
                    record = json.loads(raw)
                except json.JSONDecodeError as exc:
                    errors.append(f"line {idx}: invalid JSON ({exc})")
                    continue
                try:
                    observations.append(ScanObservation.model_validate(record))
                except ValidationError as exc:
                    errors.append(f"line {idx}: {exc.error_count()} validation error(s)")
        if errors:
            raise RecordLoadError(errors, observations)
        return observations


class NetworkLoader:
    """Load saved network configurations from a JSON document."""

    def load(self, path: Path) -> list[SavedConfiguration]:
        with path.open("r", encoding="utf-8") as handle:
            try:
                data = json.load(handle)
            except json.JSONDecodeError as exc:
                raise ValueError(f"Invalid networks JSON: {exc}") from exc
        records = data.get("networks", []) if isinstance(data, dict) else data
        if not isinstance(records, list):
            raise ValueError("Networks document must be a list or contain 'networks'")

        configurations: list[SavedConfiguration] = []
        errors: list[str] = []
        seen_ids: set[int] = set()
        for idx, record in enumerate(records):
            try:
                configuration = SavedConfiguration.model_validate(record)
            except ValidationError as exc:
                errors.append(f"network {idx}: {exc.error_count()} validation error(s)")
                continue
            if configuration.network_id in seen_ids:
                errors.append(f"network {idx}: duplicate network_id {configuration.network_id}")
                continue
            seen_ids.add(configuration.network_id)
            configurations.append(configuration)
        if errors:
            raise RecordLoadError(errors, configurations)
        return configurations


class OutputWriter:
    """Persist nomination results."""

    def write(self, path: Path, payload: dict | list[dict]) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps(payload, ensure_ascii=False, indent=2),
            encoding="utf-8",
        )


class NominationPipeline:
    """Load scans and saved networks, nominate, and write candidates."""

    def __init__(
        self,
        *,
        nominator_factory: NominatorFactory,
        scan_loader: ScanLoader | None = None,
        network_loader: NetworkLoader | None = None,
        writer: OutputWriter | None = None,
    ) -> None:
        self._nominator_factory = nominator_factory
        self._scans = scan_loader or ScanLoader()
        self._networks = network_loader or NetworkLoader()
        self._writer = writer or OutputWriter()
        self._logger = structlog.get_logger(__name__)

    def run(
        self,
        *,
        scans_path: Path,
        networks_path: Path,
        output_path: Path,
        fresh_scan: bool = True,
        untrusted_allowed: bool = False,
        current_network_id: int | None = None,
        current_bssid: str | None = None,
        audit_logger: "AuditLogger | None" = None,
    ) -> list[dict]:
        load_errors: list[str] = []
        try:
            configurations = self._networks.load(networks_path)
        except RecordLoadError as exc:
            configurations = exc.partial
            load_errors.extend(exc.errors)
            self._logger.warning("networks.partial_load", errors=exc.errors)
        try:
            observations = self._scans.load(scans_path)
        except RecordLoadError as exc:
            observations = exc.partial
            load_errors.extend(exc.errors)
            self._logger.warning("scans.partial_load", errors=exc.errors)

        store = InMemoryConfigurationStore(configurations)
        nominator = self._nominator_factory(store=store)
        collector = CandidateCollector()
        nominator.nominate(
            observations,
            collector,
            fresh_scan=fresh_scan,
            untrusted_allowed=untrusted_allowed,
            current_network_id=current_network_id,
            current_bssid=current_bssid,
        )

        results = [serialize_candidate(pair) for pair in collector.candidates]
        if audit_logger:
            for entry in results:
                audit_logger.append(entry)

        metadata = {
            "observation_count": len(observations),
            "network_count": len(configurations),
            "candidate_count": len(results),
            "filters": nominator.filter_names,
            "errors": load_errors,
            "timestamp": pendulum.now().to_iso8601_string(),
            "app_version": __version__,
        }
        self._writer.write(output_path, {"metadata": metadata, "results": results})
        return results


def serialize_candidate(pair: CandidatePair) -> dict:
    return {
        "network_id": pair.configuration.network_id,
        "ssid": pair.configuration.ssid,
        "bssid": pair.observation.bssid,
        "level": pair.observation.level,
        "frequency": pair.observation.frequency,
        "band": pair.observation.band,
        "security": pair.configuration.security.value,
    }


class AuditLogger:
    """Append-only audit logger writing JSON lines."""

    def __init__(self, path: Path):
        self._path = path
        self._path.parent.mkdir(parents=True, exist_ok=True)

    def append(self, record: dict) -> None:
        with self._path.open("a", encoding="utf-8") as handle:
            handle.write(json.dumps(record, ensure_ascii=False))
            handle.write("\n")
