"""Runtime configuration helpers."""

from ecoroute.config.settings import EstimatorSettings, load_settings

__all__ = ["EstimatorSettings", "load_settings"]
