"""Configuration loading."""
import logging
import os
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from ansiblestyle.constants import BOOLEAN_KEYS, DEFAULT_CONFIG_FILES, LOCAL_KEYS
from ansiblestyle.errors import ConfigError

_logger = logging.getLogger(__name__)


class LintConfig(BaseModel):
    """Options read from an ``.ansible-style`` file."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    skip_list: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)
    exclude_paths: List[str] = Field(default_factory=list)
    # Added to the built-in tables, never replacing them
    boolean_keys: List[str] = Field(default_factory=list)
    local_keys: List[str] = Field(default_factory=list)
    workers: Optional[int] = Field(default=None, ge=1)
    verbosity: int = Field(default=0, ge=0)

    @property
    def all_boolean_keys(self) -> frozenset:
        return BOOLEAN_KEYS.union(self.boolean_keys)

    @property
    def all_local_keys(self) -> frozenset:
        return LOCAL_KEYS.union(self.local_keys)


class Settings(BaseSettings):
    """Values read from the environment.

    ``ANSIBLE_STYLE_CONFIG`` points at a config file and
    ``ANSIBLE_STYLE_VERBOSITY`` overrides the verbosity it sets.
    """

    model_config = SettingsConfigDict(
        env_prefix="ANSIBLE_STYLE_",
        extra="ignore",
    )

    config: Optional[str] = None
    verbosity: Optional[int] = None


def find_config(directory: str = ".") -> Optional[str]:
    """Return the first default config file present in directory."""
    for name in DEFAULT_CONFIG_FILES:
        candidate = os.path.join(directory, name)
        if os.path.isfile(candidate):
            return candidate
    return None


def load_config(path: Optional[str] = None) -> LintConfig:
    """Load a config file, falling back to defaults when there is none."""
    settings = Settings()
    if path is None:
        path = settings.config or find_config()
    config = LintConfig()
    if path is not None:
        config = _read_config(path)
    if settings.verbosity is not None:
        config = config.model_copy(update={"verbosity": settings.verbosity})
    return config


def _read_config(path: str) -> LintConfig:
    _logger.debug("Loading config from %s", path)
    yaml = YAML(typ="safe", pure=True)
    try:
        with open(path, "r", encoding="utf-8") as handle:
            data: Any = yaml.load(handle)
    except OSError as exc:
        raise ConfigError(f"{path}: {exc.strerror}") from exc
    except YAMLError as exc:
        raise ConfigError(f"{path}: invalid YAML: {exc}") from exc
    if data is None:
        return LintConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a mapping at the top level")
    try:
        return LintConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"{path}: {exc}") from exc
