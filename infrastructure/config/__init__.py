"""
Configuration management: models, loading, and validation.

Handles:
- EngineConfig: taxonomy sources, fetch timeout, walk depth bound
- Extra macrolanguage fallbacks
- Environment variable overrides

The loader module performs file I/O; models are pure Pydantic classes.
"""

from infrastructure.config.loader import load_engine_config
from infrastructure.config.models import EngineConfig, TaxonomySourceConfig

__all__ = [
    "EngineConfig",
    "TaxonomySourceConfig",
    "load_engine_config",
]
