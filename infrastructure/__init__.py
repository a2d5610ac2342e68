"""
Infrastructure layer: External dependencies and I/O boundaries.

Contains adapters for:
- Configuration loading (YAML, environment)
- Taxonomy source reading (HTTP, local files)
- Dataset reading and report writing
- Observability (logging)

This is the only layer that performs I/O operations.
"""

# Most commonly used - exposed at top level for convenience
from infrastructure.config import EngineConfig, TaxonomySourceConfig, load_engine_config
from infrastructure.io import read_sources

__all__ = [
    "load_engine_config",
    "EngineConfig",
    "TaxonomySourceConfig",
    "read_sources",
]
