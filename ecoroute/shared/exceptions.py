"""Shared (non-domain) exceptions."""


class ConfigError(Exception):
    """Configuration value is unusable."""


class FixtureError(Exception):
    """Route fixture could not be loaded."""

    def __init__(self, source: str, message: str):
        self.source = source
        super().__init__(f"[{source}] {message}")
