"""
Settings for the status relay.

JSON files are read and written back; TOML files are read-only input.
"""
from typing import Any, Optional
import os
import tomllib
from pydantic import BaseModel, Field
from loguru import logger

from .events import UNKNOWN_STATUS

# --- Settings Models ---
class GeneralSettings(BaseModel):
    debug_mode: bool = True
    log_dir: Optional[str] = None  # No file sink when unset

class ListenerSettings(BaseModel):
    initial_status: str = UNKNOWN_STATUS

class AppConfig(BaseModel):
    general: GeneralSettings = Field(default_factory=GeneralSettings)
    listeners: ListenerSettings = Field(default_factory=ListenerSettings)

# --- Manager ---
class ConfigManager:
    """
    Loads, validates and persists AppConfig.

    Usage:
        config = ConfigManager("statusrelay.json")
        config.update("listeners", "initial_status", "unknown")
        config.get("general", "debug_mode")
    """
    def __init__(self, filepath: str = "statusrelay.json"):
        self.filepath = filepath
        self._data = AppConfig()
        self.load()

    @property
    def data(self) -> AppConfig:
        return self._data

    @property
    def is_read_only(self) -> bool:
        return self.filepath.endswith(".toml")

    def get(self, section: str, key: str) -> Any:
        self._check_field(section, key)
        return getattr(getattr(self._data, section), key)

    def update(self, section: str, key: str, value: Any) -> None:
        """
        Set one field, re-validate the whole model and save.

        Raises:
            ValueError: unknown section/key, or a value pydantic rejects
        """
        self._check_field(section, key)

        raw = self._data.model_dump()
        raw[section][key] = value
        self._data = AppConfig.model_validate(raw)
        self.save()
        logger.debug(f"Config updated: {section}.{key} = {value!r}")

    def load(self) -> None:
        """Read the settings file; a missing or broken file yields defaults."""
        if not os.path.isfile(self.filepath):
            logger.info(f"No config at {self.filepath}, writing defaults")
            self.save()
            return

        try:
            if self.is_read_only:
                with open(self.filepath, "rb") as f:
                    self._data = AppConfig.model_validate(tomllib.load(f))
            else:
                with open(self.filepath, "r", encoding="utf-8") as f:
                    self._data = AppConfig.model_validate_json(f.read())
        except (OSError, ValueError) as e:
            # ValidationError and TOMLDecodeError are both ValueErrors
            logger.error(f"Invalid config {self.filepath}, using defaults: {e}")
            self._data = AppConfig()
            self.save()

    def save(self) -> None:
        if self.is_read_only:
            return
        dirname = os.path.dirname(self.filepath)
        try:
            if dirname:
                os.makedirs(dirname, exist_ok=True)
            with open(self.filepath, "w", encoding="utf-8") as f:
                f.write(self._data.model_dump_json(indent=4))
        except OSError as e:
            logger.error(f"Could not write config {self.filepath}: {e}")

    @staticmethod
    def _check_field(section: str, key: str) -> None:
        section_field = AppConfig.model_fields.get(section)
        if section_field is None:
            raise ValueError(f"Invalid section: {section}")
        if key not in section_field.annotation.model_fields:
            raise ValueError(f"Invalid key: {key} in section {section}")
