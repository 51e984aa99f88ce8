"""Configuration management for tablemorph."""

from __future__ import annotations

import json
from argparse import ArgumentParser
from multiprocessing import cpu_count

from loguru import logger
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from tablemorph.core.types import Direction, SubstitutionMode
from tablemorph.utils import Constants, expand_file_path, resolve_jobs


class Config(BaseModel):
    """Configuration for variant generation."""

    dictionary: str | None = Field(None, description="Dictionary file, one word per line")
    tables: list[str] = Field(default_factory=list, description="Substitution table files")
    min_substitutions: int = Field(
        Constants.DEFAULT_MIN_SUBSTITUTIONS, ge=0, description="Minimum substitutions"
    )
    max_substitutions: int = Field(
        Constants.DEFAULT_MAX_SUBSTITUTIONS, ge=1, description="Maximum substitutions"
    )
    jobs: int = Field(default_factory=cpu_count, ge=1)
    substitute_all: bool = Field(False, description="Substitute whole patterns at once")
    reverse: bool = Field(False, description="Enumerate from most to fewest substitutions")
    verbose: bool = False
    debug: bool = False

    @field_validator("tables", mode="before")
    @classmethod
    def parse_table_list(cls, v):
        """Parse comma-separated string or array into a list of paths."""
        if v is None or v == "":
            return []
        if isinstance(v, str):
            return [s.strip() for s in v.split(",") if s.strip()]
        return v

    @field_validator("jobs", mode="before")
    @classmethod
    def resolve_all_cores(cls, v):
        """Map the "all cores" thread count onto the machine's core count."""
        return resolve_jobs(v)

    @model_validator(mode="after")
    def validate_cross_fields(self):
        """Validate cross-field constraints."""
        if self.max_substitutions < self.min_substitutions:
            raise ValueError(
                f"max_substitutions ({self.max_substitutions}) must be >= "
                f"min_substitutions ({self.min_substitutions})"
            )
        return self

    @property
    def mode(self) -> SubstitutionMode:
        """Occurrence-level or pattern-level substitution."""
        return SubstitutionMode.PATTERN if self.substitute_all else SubstitutionMode.OCCURRENCE

    @property
    def direction(self) -> Direction:
        """Forward or reverse enumeration order."""
        return Direction.REVERSE if self.reverse else Direction.FORWARD

    @property
    def effective_min(self) -> int:
        """Minimum substitutions as applied by the generators."""
        return max(self.min_substitutions, 1)


def load_config(json_path: str | None, cli_args, parser: ArgumentParser) -> Config:
    """Load JSON config, override with CLI args, return Config object."""

    def get_value(key: str, fallback):
        """Get value with correct priority: CLI > JSON > Fallback."""
        cli_value = getattr(cli_args, key)
        default_value = parser.get_default(key)
        # Use CLI value only if it was explicitly set by the user
        if cli_value != default_value:
            return cli_value
        return json_config.get(key, fallback)

    json_config = {}
    if json_path:
        json_path = expand_file_path(json_path) or json_path
        try:
            with open(json_path, "r", encoding="utf-8") as f:
                json_config = json.load(f)
        except FileNotFoundError:
            logger.error(f"✗ Config file not found: {json_path}")
            logger.error("  Please check the file path and try again")
            raise
        except json.JSONDecodeError as e:
            logger.error(f"✗ Invalid JSON in config file {json_path}: {e}")
            logger.error("  Please validate your JSON syntax")
            raise ValueError(f"Invalid JSON configuration: {e}") from e
        except PermissionError:
            logger.error(f"✗ Permission denied reading config file: {json_path}")
            logger.error("  Please check file permissions and try again")
            raise
        except UnicodeDecodeError as e:
            logger.error(f"✗ Encoding error reading config file {json_path}: {e}")
            logger.error("  Please ensure the file is UTF-8 encoded")
            raise

    config_dict = {
        "dictionary": get_value("dictionary", None),
        "tables": get_value("tables", None),
        "min_substitutions": get_value(
            "min_substitutions", Constants.DEFAULT_MIN_SUBSTITUTIONS
        ),
        "max_substitutions": get_value(
            "max_substitutions", Constants.DEFAULT_MAX_SUBSTITUTIONS
        ),
        "jobs": get_value("jobs", cpu_count()),
        "substitute_all": cli_args.substitute_all or json_config.get("substitute_all", False),
        "reverse": cli_args.reverse or json_config.get("reverse", False),
        "verbose": cli_args.verbose or json_config.get("verbose", False),
        "debug": cli_args.debug or json_config.get("debug", False),
    }

    try:
        return Config.model_validate(config_dict)
    except ValidationError as e:
        logger.error(f"✗ Configuration validation failed: {e}")
        logger.error("  Please check your configuration values")
        raise ValueError(f"Invalid configuration: {e}") from e
