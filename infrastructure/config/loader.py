"""Configuration loading from YAML files."""

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from infrastructure.config.models import EngineConfig, TaxonomySourceConfig
from infrastructure.constants import DATA_DIR, TAXONOMY_BASE_URL_ENV


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML file and return as dict."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected YAML dict in {path}, got {type(data)}")

    return data


def _parse_sources(raw: Any, path: Path) -> list[TaxonomySourceConfig] | None:
    if raw is None:
        return None
    if not isinstance(raw, list):
        raise ValueError(f"'sources' must be a list in {path}")

    sources: list[TaxonomySourceConfig] = []
    for i, item in enumerate(raw):
        # allow the short form: "- languages.csv"
        if isinstance(item, str):
            sources.append(TaxonomySourceConfig(name=Path(item).stem or f"source{i}", location=item))
        elif isinstance(item, dict) and item.get("location"):
            sources.append(
                TaxonomySourceConfig(
                    name=str(item.get("name") or Path(str(item["location"])).stem),
                    location=str(item["location"]),
                )
            )
        else:
            raise ValueError(f"Invalid source entry #{i} in {path}: {item!r}")
    return sources


def load_engine_config(path: Path, *, environ: Mapping[str, str] | None = None) -> EngineConfig:
    """
    Load engine.yaml into an EngineConfig.

    Relative source locations are resolved against `base_url` (default: data/).
    The TAXONOMY_BASE_URL environment variable overrides `base_url`.
    """
    env = os.environ if environ is None else environ
    data = _load_yaml(path)

    extra_fallbacks = data.get("extra_fallbacks") or {}
    if not isinstance(extra_fallbacks, dict):
        raise ValueError(f"'extra_fallbacks' must be a mapping in {path}")

    base_url = env.get(TAXONOMY_BASE_URL_ENV) or data.get("base_url") or str(DATA_DIR)

    kwargs: dict[str, Any] = {
        "base_url": base_url,
        "extra_fallbacks": {str(k): str(v) for k, v in extra_fallbacks.items()},
    }
    sources = _parse_sources(data.get("sources"), path)
    if sources is not None:
        kwargs["sources"] = sources
    if "timeout_s" in data:
        kwargs["timeout_s"] = data["timeout_s"]
    if "max_ancestry_depth" in data:
        kwargs["max_ancestry_depth"] = data["max_ancestry_depth"]

    return EngineConfig(**kwargs)
