import logging
from pathlib import Path
from typing import List

import yaml
from pydantic import BaseModel, ValidationError, field_validator

from entigen.exceptions import ConfigurationError
from entigen.generators import CODE_GENERATORS

logger = logging.getLogger(__name__)

# Path to the configuration file
CONFIG_FILE = Path('entigen.yaml')
LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


class CodeGeneratorConfig(BaseModel):
    target_directory: str = "Assets/Sources"
    code_generators: List[str] = list(CODE_GENERATORS)
    log_level: str = "info"

    @field_validator("target_directory")
    @classmethod
    def _non_empty(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("target_directory must not be empty")
        return value

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        value = value.lower()
        if value not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return value

    def generators(self) -> list:
        """Instantiate the configured generators, in config order."""
        unknown = [name for name in self.code_generators if name not in CODE_GENERATORS]
        if unknown:
            raise ConfigurationError(
                f"Unknown code generators: {unknown}. Valid generators are: {', '.join(CODE_GENERATORS)}",
                "code_generators",
            )
        return [CODE_GENERATORS[name]() for name in self.code_generators]


def load_config(config_file: Path | str | None = None) -> CodeGeneratorConfig:
    """
    Load and return the configuration from entigen.yaml.
    If the file is not found, return default configuration values.
    """
    config_path = Path(config_file) if config_file else CONFIG_FILE
    if not config_path.exists():
        logger.warning(f'Configuration file {config_path} not found. Using defaults.')
        return CodeGeneratorConfig()

    try:
        with open(config_path, 'r') as config_handle:
            settings = yaml.safe_load(config_handle) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Could not read configuration file {config_path}: {e}") from e

    if not isinstance(settings, dict):
        raise ConfigurationError(f"Configuration file {config_path} must contain a mapping")
    try:
        return CodeGeneratorConfig(**settings)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration in {config_path}: {e}") from e
