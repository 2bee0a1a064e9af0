"""Pydantic models describing the route localization settings."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator, model_validator
from typing_extensions import Self


class ConfigurationError(ValueError):
    """Raised when configuration values violate schema expectations."""


class ImmutableModel(BaseModel):
    """Base class that freezes instances and rejects unknown fields."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)


class LocalizationSettings(ImmutableModel):
    """Settings exposed to the embedding application.

    An empty ``locales`` tuple means "every locale known to the catalogue" and a
    missing ``default_locale`` defers to the catalogue default. Both are
    resolved by :class:`routelocale.routing.RoutesLocalization`.
    """

    locales: tuple[str, ...] = ()
    default_locale: str | None = None
    include_default_locale: bool = True
    translations_dir: Path | None = None

    @field_validator("locales", mode="before")
    @classmethod
    def _coerce_locales(cls, value: Any) -> tuple[str, ...]:
        if value is None:
            return ()
        if isinstance(value, str):
            value = value.split(",")
        locales = tuple(str(item).strip() for item in value)
        if any(not locale for locale in locales):
            raise ConfigurationError("Configured locales must be non-empty strings")
        # Preserve order while discarding duplicates.
        return tuple(dict.fromkeys(locales))

    @field_validator("default_locale", mode="before")
    @classmethod
    def _coerce_default_locale(cls, value: Any) -> str | None:
        if value is None:
            return None
        text = str(value).strip()
        return text or None

    @model_validator(mode="after")
    def _validate_default_locale(self) -> Self:
        if self.locales and self.default_locale and self.default_locale not in self.locales:
            raise ConfigurationError(
                f"Default locale '{self.default_locale}' is not one of the configured locales"
            )
        return self


__all__ = ["ConfigurationError", "ImmutableModel", "LocalizationSettings"]
