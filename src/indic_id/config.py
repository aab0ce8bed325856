"""Configuration loader with Pydantic v2 validation.

Loads an ``indic-id.yaml`` file into a typed :class:`IndicIdConfig`.
Unknown keys are ignored with a warning so older releases can read newer
files.

Example
-------
::

    version: "1"
    log_level: INFO
    scrub:
      aadhaar: true
      pan: true
      gstin: false
      placeholder_template: "<{label}>"
    validation:
      strict_bank_codes: false

>>> config = ConfigLoader().load_string("scrub: {gstin: false}")
>>> config.scrub.to_options().enabled_labels()
['aadhaar', 'pan']
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from indic_id.detection.redactor import DEFAULT_PLACEHOLDER, ScrubOptions

logger = logging.getLogger(__name__)

_KNOWN_TOP_KEYS: frozenset[str] = frozenset(["version", "log_level", "scrub", "validation"])


class ConfigError(ValueError):
    """Raised when a configuration file is malformed or invalid.

    Attributes
    ----------
    config_path:
        The path to the config file that caused the error, if known.
    """

    def __init__(self, message: str, config_path: str | None = None) -> None:
        self.config_path = config_path
        prefix = f"[{config_path}] " if config_path else ""
        super().__init__(f"{prefix}{message}")


class ScrubConfig(BaseModel):
    """Which identifiers the scrubber removes and how they are replaced."""

    aadhaar: bool = Field(default=True)
    pan: bool = Field(default=True)
    gstin: bool = Field(default=True)
    placeholder_template: str = Field(default=DEFAULT_PLACEHOLDER)
    mask_char: str | None = Field(default=None, min_length=1, max_length=1)

    @field_validator("placeholder_template")
    @classmethod
    def validate_template(cls, value: str) -> str:
        try:
            value.format(label="LABEL")
        except (AttributeError, IndexError, KeyError, TypeError, ValueError) as exc:
            raise ValueError(
                f"placeholder_template may only use the '{{label}}' field: {exc}"
            ) from exc
        return value

    def to_options(self) -> ScrubOptions:
        """Return the equivalent :class:`ScrubOptions`."""
        return ScrubOptions(
            aadhaar=self.aadhaar,
            pan=self.pan,
            gstin=self.gstin,
            placeholder_template=self.placeholder_template,
            mask_char=self.mask_char,
        )


class ValidationConfig(BaseModel):
    """Validator behaviour switches."""

    strict_bank_codes: bool = Field(default=True)


class IndicIdConfig(BaseModel):
    """Top-level configuration schema.

    All sections are optional and fall back to defaults.
    """

    version: str = Field(default="1")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="WARNING")
    scrub: ScrubConfig = Field(default_factory=ScrubConfig)
    validation: ValidationConfig = Field(default_factory=ValidationConfig)


class ConfigLoader:
    """Loads and validates YAML configuration.

    Example
    -------
    >>> loader = ConfigLoader()
    >>> loader.defaults().validation.strict_bank_codes
    True
    """

    def load(self, config_path: str | Path) -> IndicIdConfig:
        """Load and validate a YAML configuration file.

        Raises
        ------
        FileNotFoundError:
            When the config file does not exist.
        ConfigError:
            When the file cannot be read as UTF-8, or the YAML is malformed
            or fails validation.
        """
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config not found: {config_path}")

        try:
            with config_path.open("r", encoding="utf-8") as fh:
                text = fh.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfigError(f"Cannot read config: {exc}", str(config_path)) from exc

        config = self._parse(text, str(config_path))
        logger.info("Loaded configuration from %s", config_path)
        return config

    def load_string(self, yaml_content: str) -> IndicIdConfig:
        """Load and validate a YAML string directly."""
        return self._parse(yaml_content, None)

    def defaults(self) -> IndicIdConfig:
        """Return a configuration with all defaults applied."""
        return IndicIdConfig()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _parse(self, yaml_content: str, source: str | None) -> IndicIdConfig:
        try:
            raw = yaml.safe_load(yaml_content) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML: {exc}", source) from exc

        if not isinstance(raw, dict):
            raise ConfigError(
                f"Top-level YAML must be a mapping, got {type(raw).__name__}", source
            )

        unknown = set(raw) - _KNOWN_TOP_KEYS
        if unknown:
            logger.warning("Ignoring unknown config keys: %s", sorted(unknown))

        try:
            return IndicIdConfig.model_validate(raw)
        except ValidationError as exc:
            raise ConfigError(str(exc), source) from exc
