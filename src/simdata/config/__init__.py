"""
Configuration management with typed Pydantic models.

Selects the document source per domain and the logging output.
"""

from simdata.config.loader import load_config
from simdata.config.settings import LoggingConfig, SimdataConfig, SourcesConfig

__all__ = [
    "LoggingConfig",
    "SimdataConfig",
    "SourcesConfig",
    "load_config",
]
