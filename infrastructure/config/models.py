"""Configuration models (Pydantic classes)."""

from pydantic import BaseModel, Field, field_validator, model_validator

from domain.taxonomy.ancestry import DEFAULT_MAX_DEPTH
from infrastructure.constants import CONSTRUCTED_TAXONOMY_FILE, PRIMARY_TAXONOMY_FILE
from infrastructure.io.sources import is_remote


class TaxonomySourceConfig(BaseModel):
    """One taxonomy text resource (URL or filesystem path)."""

    name: str
    location: str

    @property
    def is_remote(self) -> bool:
        return is_remote(self.location)


def _default_sources() -> list[TaxonomySourceConfig]:
    return [
        TaxonomySourceConfig(name="languages", location=PRIMARY_TAXONOMY_FILE),
        TaxonomySourceConfig(name="conlangs", location=CONSTRUCTED_TAXONOMY_FILE),
    ]


class EngineConfig(BaseModel):
    """
    Runtime configuration for the language-family engine.
    - Loaded from engine.yaml
    - Relative source locations are resolved against base_url by the loader
    """

    sources: list[TaxonomySourceConfig] = Field(
        default_factory=_default_sources,
        description="Taxonomy resources, concatenated in this order (later ids override earlier ones).",
    )
    base_url: str | None = Field(
        default=None,
        description="Prefix for relative source locations: a URL or a directory path.",
    )
    timeout_s: float = Field(default=10.0, gt=0, description="HTTP timeout for remote sources.")
    max_ancestry_depth: int = Field(default=DEFAULT_MAX_DEPTH, ge=1)
    extra_fallbacks: dict[str, str] = Field(
        default_factory=dict,
        description="Macrolanguage fallbacks added on top of the built-in table.",
    )

    @field_validator("base_url")
    @classmethod
    def _blank_base_url(cls, v: str | None) -> str | None:
        if v is not None and not v.strip():
            return None
        return v

    @model_validator(mode="after")
    def _validate(self) -> "EngineConfig":
        if not self.sources:
            raise ValueError("sources must list at least one taxonomy resource")
        names = [s.name for s in self.sources]
        if len(names) != len(set(names)):
            raise ValueError(f"Duplicate source names: {names}")
        return self

    def resolved_locations(self) -> list[str]:
        """Source locations with base_url applied to relative entries."""
        out: list[str] = []
        for src in self.sources:
            if src.is_remote or self.base_url is None or src.location.startswith("/"):
                out.append(src.location)
            else:
                out.append(f"{self.base_url.rstrip('/')}/{src.location.lstrip('/')}")
        return out
