from pathlib import Path

import pytest
from pydantic import ValidationError

from infrastructure.config.loader import load_engine_config
from infrastructure.config.models import EngineConfig, TaxonomySourceConfig


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "engine.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_defaults_from_empty_file(tmp_path: Path) -> None:
    cfg = load_engine_config(_write(tmp_path, ""), environ={})
    assert [s.name for s in cfg.sources] == ["languages", "conlangs"]
    assert cfg.resolved_locations() == ["data/languages.csv", "data/conlangs.csv"]
    assert cfg.max_ancestry_depth == 256


def test_sources_short_and_long_form(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        "base_url: https://cdn.example.test/tax/\n"
        "sources:\n"
        "  - languages.csv\n"
        "  - name: extra\n"
        "    location: https://mirror.example.test/conlangs.csv\n"
        "  - /abs/local.csv\n"
        "extra_fallbacks:\n"
        "  nob: nor\n",
    )
    cfg = load_engine_config(path, environ={})

    assert [s.name for s in cfg.sources] == ["languages", "extra", "local"]
    assert cfg.resolved_locations() == [
        "https://cdn.example.test/tax/languages.csv",
        "https://mirror.example.test/conlangs.csv",
        "/abs/local.csv",
    ]
    assert cfg.extra_fallbacks == {"nob": "nor"}


def test_env_overrides_base_url(tmp_path: Path) -> None:
    path = _write(tmp_path, "base_url: data\n")
    cfg = load_engine_config(path, environ={"TAXONOMY_BASE_URL": "https://env.example.test"})
    assert cfg.resolved_locations()[0] == "https://env.example.test/languages.csv"


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_engine_config(tmp_path / "nope.yaml", environ={})


def test_invalid_documents_raise(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        load_engine_config(_write(tmp_path, "- just\n- a list\n"), environ={})
    with pytest.raises(ValueError):
        load_engine_config(_write(tmp_path, "sources: languages.csv\n"), environ={})
    with pytest.raises(ValueError):
        load_engine_config(_write(tmp_path, "extra_fallbacks: [a, b]\n"), environ={})


def test_model_validation() -> None:
    with pytest.raises(ValidationError):
        EngineConfig(sources=[])
    with pytest.raises(ValidationError):
        EngineConfig(
            sources=[
                TaxonomySourceConfig(name="a", location="x.csv"),
                TaxonomySourceConfig(name="a", location="y.csv"),
            ]
        )
    with pytest.raises(ValidationError):
        EngineConfig(max_ancestry_depth=0)


def test_remote_sources_are_detected_by_scheme() -> None:
    assert TaxonomySourceConfig(name="a", location="https://example.test/a.csv").is_remote
    assert not TaxonomySourceConfig(name="a", location="data/a.csv").is_remote
