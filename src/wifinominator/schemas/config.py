"\"\"\"Pydantic configuration schema for CLI YAML input.\"\"\""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator

from ..core.filters import validate_filter_chain


class NominatorConfig(BaseModel):
    filters: list[str] | None = None

    @field_validator("filters")
    @classmethod
    def _valid_chain(cls, value: list[str] | None) -> list[str] | None:
        if value is None:
            return value
        return validate_filter_chain(value)


class TelephonySettings(BaseModel):
    carrier_subscriptions: dict[int, int] = Field(default_factory=dict)
    default_data_subscription: int | None = None
    present_subscriptions: list[int] = Field(default_factory=list)


class AppConfig(BaseModel):
    nominator: NominatorConfig = Field(default_factory=NominatorConfig)
    telephony: TelephonySettings | None = None

    def to_settings(self) -> dict[str, Any]:
        settings: dict[str, Any] = {}
        nominator_settings = self.nominator.model_dump(exclude_none=True)
        if nominator_settings:
            settings["nominator"] = nominator_settings
        if self.telephony is not None:
            settings["telephony"] = self.telephony.model_dump()
        return settings


def load_config(raw: Any) -> AppConfig:
    if not isinstance(raw, dict):
        raise ValidationError.from_exception_data(
            "AppConfig",
            [{"type": "dict_type", "loc": ("config",), "input": raw}],
        )
    return AppConfig.model_validate(raw)
