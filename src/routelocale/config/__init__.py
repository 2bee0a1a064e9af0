"""Configuration models and loaders for route localization."""

from .schema import ConfigurationError, LocalizationSettings
from .settings import load_settings

__all__ = ["ConfigurationError", "LocalizationSettings", "load_settings"]
