from pathlib import Path

# Repo-root conventional directories/files (overrideable via engine.yaml)
CONFIG_DIR = Path("configs")
ENGINE_CONFIG_FILE = CONFIG_DIR / "engine.yaml"

DATA_DIR = Path("data")
PRIMARY_TAXONOMY_FILE = "languages.csv"
CONSTRUCTED_TAXONOMY_FILE = "conlangs.csv"

# Environment overrides
TAXONOMY_BASE_URL_ENV = "TAXONOMY_BASE_URL"
