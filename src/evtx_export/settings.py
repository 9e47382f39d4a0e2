# src/evtx_export/settings.py
import os

import yaml
from pydantic import BaseModel, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from evtx_export.constants import OUTPUT_ENCODING
from evtx_export.errors import ConfigurationError
from evtx_export.formats import OutputFormat, parse_format


class LoggingConfig(BaseModel):
    level: str = "INFO"
    format: str = "json"  # "json" or "human"
    structured: bool = True


class ExportConfig(BaseModel):
    default_format: OutputFormat = OutputFormat.JSON
    encoding: str = OUTPUT_ENCODING

    @field_validator("default_format", mode="before")
    @classmethod
    def _known_format(cls, v):
        return parse_format(v)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="EVTX_EXPORT_",
        env_nested_delimiter="__",
        extra="ignore",
    )
    logging: LoggingConfig = LoggingConfig()
    export: ExportConfig = ExportConfig()

    @staticmethod
    def _deep_update(d: dict, u: dict) -> dict:
        # Recursively update dict d with values from u
        for k, v in u.items():
            if isinstance(v, dict) and isinstance(d.get(k), dict):
                d[k] = Settings._deep_update(d[k], v)
            else:
                d[k] = v
        return d

    @staticmethod
    def _read_yaml(path: str) -> dict:
        if not os.path.exists(path):
            return {}
        try:
            with open(path, "r", encoding="utf-8") as f:
                return yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid config file {path}: {e}") from e

    @staticmethod
    def load(path: str) -> "Settings":
        """Load ``base.yaml`` next to ``path`` and merge ``path`` over it.

        Missing files contribute nothing, so running outside the project tree
        falls back to the defaults. ``EVTX_EXPORT_*`` environment variables
        only fill in sections the files leave unset.
        """
        base_path = os.path.join(os.path.dirname(path), "base.yaml")
        base = Settings._read_yaml(base_path)
        override = Settings._read_yaml(path) if path != base_path else {}
        merged = Settings._deep_update(base, override)
        try:
            return Settings(**merged)
        except ValueError as e:
            # pydantic's ValidationError is a ValueError
            raise ConfigurationError(f"Invalid configuration in {path}: {e}") from e


def config_path_for(env: str) -> str:
    """Return the YAML path for a config environment (``configs/<env>.yaml``).

    ``EVTX_EXPORT_CONFIG`` points at an explicit file instead.
    """
    return os.getenv("EVTX_EXPORT_CONFIG") or f"configs/{env}.yaml"
