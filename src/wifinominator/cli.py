"\"\"\"Typer CLI entrypoint for the nomination pipeline.\"\"\""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import typer
import yaml
from pydantic import ValidationError

from .container import create_container
from .logging import configure_logging
from .pipeline import AuditLogger
from .schemas.config import load_config

app = typer.Typer(help="Saved Wi-Fi network candidate nomination CLI.")


@app.command()
def run(
    scans: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Scan results JSONL path."),
    networks: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Saved networks JSON path."),
    output: Path = typer.Option(
        ...,
        exists=False,
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
        help="Output JSON path.",
    ),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
    fresh_scan: bool = typer.Option(True, "--fresh-scan/--reevaluate", help="Whether this pass follows a new scan."),
    untrusted_allowed: bool = typer.Option(False, help="Allow networks that need explicit user trust."),
    current_network_id: Optional[int] = typer.Option(None, help="Network id of the connected network."),
    current_bssid: Optional[str] = typer.Option(None, help="BSSID of the connected access point."),
    log_level: str = typer.Option("INFO", help="Log level for structured logging."),
    log_format: str = typer.Option("json", help="Log renderer: json or console."),
    audit_log: Optional[Path] = typer.Option(None, dir_okay=False, help="Audit log output (JSONL)."),
) -> None:
    """Run the nomination pipeline."""
    settings: dict[str, Any] = {}
    if config:
        with config.open("r", encoding="utf-8") as handle:
            loaded = yaml.safe_load(handle) or {}
        try:
            settings = load_config(loaded).to_settings()
        except ValidationError as exc:
            raise typer.BadParameter(f"Invalid config file: {exc}", param_name="config") from exc

    if log_format not in ("json", "console"):
        raise typer.BadParameter("Expected json or console", param_name="log_format")
    configure_logging(log_level, fmt=log_format)

    container = create_container(settings=settings)
    pipeline = container.pipeline()
    audit_logger = AuditLogger(audit_log) if audit_log else None

    results = pipeline.run(
        scans_path=scans,
        networks_path=networks,
        output_path=output,
        fresh_scan=fresh_scan,
        untrusted_allowed=untrusted_allowed,
        current_network_id=current_network_id,
        current_bssid=current_bssid,
        audit_logger=audit_logger,
    )
    typer.echo(f"Nominated {len(results)} candidates. Results saved to {output}.")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
