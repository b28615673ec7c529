"""Desk configuration.

Defaults reproduce the built-in behaviour, so a config file is optional.
A YAML file can change logging, the final dump format, the drinking age
and the seed list. Nothing is ever written back.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml

from treehouse.desk.greeter import DRINKING_AGE
from treehouse.models.visitor import MAX_AGE, Visitor
from treehouse.registry.seed import default_visitors
from treehouse.utils.logging import LEVELS
from treehouse.utils.result import ConfigError, Err, Ok, Result

LOG_FORMATS = ("json", "text")
DUMP_FORMATS = ("text", "json")


@dataclass
class LoggingConfig:
    """Logging settings."""

    level: str = "warn"
    format: str = "json"


@dataclass
class DeskConfig:
    """
    Complete desk configuration.

    ``seed`` holds raw seed entries from the config file; ``None`` means
    the built-in list is used.
    """

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    dump_format: str = "text"
    drinking_age: int = DRINKING_AGE
    seed: Optional[list[dict[str, Any]]] = None

    @classmethod
    def from_yaml(cls, path: Path) -> Result["DeskConfig", ConfigError]:
        """
        Load configuration from a YAML file.

        Args:
            path: Path to YAML configuration file

        Returns:
            Result with loaded config or error
        """
        path = Path(path)

        if not path.exists():
            return Err(ConfigError(
                field="path",
                message=f"Configuration file not found: {path}",
            ))

        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            return Err(ConfigError(
                field="yaml",
                message=f"Failed to parse YAML: {e}",
            ))
        except OSError as e:
            return Err(ConfigError(
                field="file",
                message=f"Failed to read config file: {e}",
            ))

        if not isinstance(data, dict):
            return Err(ConfigError(
                field="yaml",
                message="Top level of the config file must be a mapping",
            ))

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Result["DeskConfig", ConfigError]:
        """
        Create configuration from a dictionary.

        Args:
            data: Configuration dictionary

        Returns:
            Result with loaded config or error
        """
        logging_data = data.get("logging") or {}
        if not isinstance(logging_data, dict):
            return Err(ConfigError(field="logging", message="Must be a mapping"))

        seed = data.get("visitors")
        if seed is not None and not isinstance(seed, list):
            return Err(ConfigError(field="visitors", message="Must be a list"))

        drinking_age = data.get("drinking_age", DRINKING_AGE)
        # bool is a subclass of int; reject it along with floats and strings.
        if not isinstance(drinking_age, int) or isinstance(drinking_age, bool):
            return Err(ConfigError(
                field="drinking_age",
                message=f"Must be an integer, got {data.get('drinking_age')!r}",
            ))

        config = cls(
            logging=LoggingConfig(
                level=str(logging_data.get("level", "warn")).lower(),
                format=str(logging_data.get("format", "json")).lower(),
            ),
            dump_format=str(data.get("dump_format", "text")).lower(),
            drinking_age=drinking_age,
            seed=seed,
        )
        return Ok(config)

    def validate(self) -> Result[None, ConfigError]:
        """
        Validate configuration values.

        Returns:
            Result indicating success or validation error
        """
        if self.logging.level not in LEVELS:
            return Err(ConfigError(
                field="logging.level",
                message=f"Must be one of {sorted(LEVELS)}, got {self.logging.level!r}",
            ))
        if self.logging.format not in LOG_FORMATS:
            return Err(ConfigError(
                field="logging.format",
                message=f"Must be one of {list(LOG_FORMATS)}, got {self.logging.format!r}",
            ))
        if self.dump_format not in DUMP_FORMATS:
            return Err(ConfigError(
                field="dump_format",
                message=f"Must be one of {list(DUMP_FORMATS)}, got {self.dump_format!r}",
            ))
        if not 0 <= self.drinking_age <= MAX_AGE:
            return Err(ConfigError(
                field="drinking_age",
                message=f"Must be between 0 and {MAX_AGE}, got {self.drinking_age}",
            ))

        result = self.build_seed()
        if result.is_err():
            return Err(result.unwrap_err())

        return Ok(None)

    def build_seed(self) -> Result[list[Visitor], ConfigError]:
        """Build the seed visitors, falling back to the built-in list."""
        if self.seed is None:
            return Ok(default_visitors())

        visitors = []
        for index, entry in enumerate(self.seed):
            if not isinstance(entry, dict):
                return Err(ConfigError(
                    field=f"visitors[{index}]",
                    message="Must be a mapping",
                ))
            try:
                visitors.append(Visitor.from_dict(entry))
            except KeyError as e:
                return Err(ConfigError(
                    field=f"visitors[{index}]",
                    message=f"Missing field {e}",
                ))
            except (TypeError, ValueError) as e:
                return Err(ConfigError(
                    field=f"visitors[{index}]",
                    message=str(e),
                ))
        return Ok(visitors)


def load_config(path: Optional[Path] = None) -> Result[DeskConfig, ConfigError]:
    """
    Load and validate the desk configuration.

    Args:
        path: YAML file to load; defaults are used when omitted

    Returns:
        Result with loaded config or error
    """
    if path is None:
        config = DeskConfig()
    else:
        result = DeskConfig.from_yaml(path)
        if result.is_err():
            return result
        config = result.unwrap()

    validation_result = config.validate()
    if validation_result.is_err():
        return Err(validation_result.unwrap_err())

    return Ok(config)
