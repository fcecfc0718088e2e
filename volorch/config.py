"""
Configuration management for volorch.

Loads config.yaml from the volorch home directory ($VOLORCH_HOME, default
~/.config/volorch). Configuration only affects the CLI surface (default
engine, logging, output format); synthesis and status projection never
read it.
"""

import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Optional

import yaml
from dotenv import load_dotenv

from volorch.engines.registry import DEFAULT_ENGINE
from volorch.errors import ConfigError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
LOG_FORMATS = ("pretty", "structured")
OUTPUT_FORMATS = ("json", "yaml")


def get_volorch_home() -> Path:
    """Get the volorch home directory."""
    home = os.environ.get("VOLORCH_HOME")
    if home:
        return Path(home)
    return Path("~/.config/volorch").expanduser()


@dataclass
class VolorchConfig:
    """
    volorch settings.

    Attributes:
        default_engine: Engine for claims without a volume type label
        log_level: DEBUG, INFO, WARNING or ERROR
        log_format: "pretty" (rich console) or "structured" (JSON lines)
        log_file: Optional file to log to in addition to the console
        output_format: "json" or "yaml" for CLI output
        env_file: Optional dotenv file loaded into the environment
    """
    default_engine: str = DEFAULT_ENGINE
    log_level: str = "INFO"
    log_format: str = "pretty"
    log_file: Optional[str] = None
    output_format: str = "json"
    env_file: Optional[str] = None

    def validate(self) -> None:
        """Validate configuration values."""
        if not self.default_engine:
            raise ConfigError("default_engine is required")

        if self.log_level.upper() not in LOG_LEVELS:
            raise ConfigError(
                f"Invalid log_level: {self.log_level}. Expected one of {list(LOG_LEVELS)}"
            )

        if self.log_format not in LOG_FORMATS:
            raise ConfigError(
                f"Invalid log_format: {self.log_format}. Expected one of {list(LOG_FORMATS)}"
            )

        if self.output_format not in OUTPUT_FORMATS:
            raise ConfigError(
                f"Invalid output_format: {self.output_format}. "
                f"Expected one of {list(OUTPUT_FORMATS)}"
            )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "VolorchConfig":
        known = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        unknown = sorted(set(data) - set(known))
        if unknown:
            raise ConfigError(f"Unknown config keys: {unknown}")
        return cls(**known)


def load_config(config_path: Optional[Path] = None) -> VolorchConfig:
    """
    Load volorch configuration from YAML file.

    Args:
        config_path: Path to config file. Defaults to config.yaml in the
            volorch home directory

    Returns:
        Validated VolorchConfig instance

    Raises:
        FileNotFoundError: If the config file does not exist
        ConfigError: If the config is not valid YAML or has invalid values
    """
    if config_path is None:
        config_path = get_volorch_home() / "config.yaml"

    if not config_path.exists():
        raise FileNotFoundError(
            f"volorch config.yaml not found at {config_path}. Run 'volorch init'."
        )

    try:
        with open(config_path, "r") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML syntax: {e}")

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration must be a mapping: {config_path}")

    config = VolorchConfig.from_dict(data)
    config.validate()

    if config.env_file:
        env_path = Path(config.env_file).expanduser()
        if env_path.exists():
            load_dotenv(env_path)

    return config
