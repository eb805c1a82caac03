# src/arena/config/loader.py

import os
import yaml
from pathlib import Path
from pydantic import ValidationError

from .errors import ConfigError, ConfigNotFoundError
from .models import ScenarioConfig

def load_config(path: str | Path) -> ScenarioConfig:
    path = Path(path)
    if not path.is_file():
        raise ConfigNotFoundError(f"Scenario file not found: {path}")

    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    # expand environment variables like ${GAMER_NAME}
    expanded = os.path.expandvars(raw)

    try:
        data = yaml.safe_load(expanded) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    try:
        return ScenarioConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid scenario in {path}:\n{e}") from e
