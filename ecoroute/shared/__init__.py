"""Shared cross-layer exceptions."""

from ecoroute.shared.exceptions import ConfigError, FixtureError

__all__ = ["ConfigError", "FixtureError"]
