"""
Configuration for coordinate string conversion.

The conversion facades take an explicit ConversionConfig instead of reading a
process-wide setting. A config can be built in code, from a dict, or from a
YAML file of the form::

    utm_convert:
      fraction_digits: 5
      datum: nad83
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from utm_convert.datum import DEFAULT_DATUM, DatumID, lookup_datum
from utm_convert.formatting import DEFAULT_FRACTION_DIGITS, MAX_FRACTION_DIGITS

logger = logging.getLogger(__name__)

CONFIG_SECTION = "utm_convert"

_KNOWN_KEYS = frozenset(["fraction_digits", "datum"])


@dataclass(frozen=True)
class ConversionConfig:
    """Settings used when rendering converted coordinates as text.

    Attributes:
        fraction_digits: Digits after the decimal point for latitude/longitude
            strings (default 3).
        datum: Datum used to invert UTM positions (default "wgs84").
    """

    fraction_digits: int = DEFAULT_FRACTION_DIGITS
    datum: DatumID = DEFAULT_DATUM

    def __post_init__(self) -> None:
        """Validate settings; raises UnknownDatumError for an unknown datum."""
        if isinstance(self.fraction_digits, bool) or not isinstance(self.fraction_digits, int):
            raise ValueError(
                f"fraction_digits must be an integer, got {type(self.fraction_digits).__name__}"
            )
        if not 0 <= self.fraction_digits <= MAX_FRACTION_DIGITS:
            raise ValueError(
                f"fraction_digits must be in range [0, {MAX_FRACTION_DIGITS}], "
                f"got {self.fraction_digits}"
            )
        lookup_datum(self.datum)

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> 'ConversionConfig':
        """Create configuration from dictionary.

        Args:
            config: Dictionary with optional keys 'fraction_digits' and 'datum'.
                Missing keys fall back to the defaults.

        Returns:
            ConversionConfig instance

        Raises:
            ValueError: If configuration is not a dict, has unknown keys or
                invalid values

        Example:
            >>> config = ConversionConfig.from_dict({'fraction_digits': 6})
            >>> config.datum
            'wgs84'
        """
        if not isinstance(config, dict):
            raise ValueError(f"Configuration must be a dictionary, got {type(config)}")

        unknown = set(config) - _KNOWN_KEYS
        if unknown:
            raise ValueError(
                f"Unknown configuration keys: {', '.join(sorted(map(str, unknown)))}. "
                f"Valid keys: {', '.join(sorted(_KNOWN_KEYS))}"
            )

        return cls(
            fraction_digits=config.get('fraction_digits', DEFAULT_FRACTION_DIGITS),
            datum=config.get('datum', DEFAULT_DATUM),
        )

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> 'ConversionConfig':
        """Load configuration from YAML file.

        Args:
            path: Path to YAML configuration file

        Returns:
            ConversionConfig instance loaded from file

        Raises:
            FileNotFoundError: If configuration file does not exist
            ValueError: If configuration file is malformed or contains invalid values
        """
        config_path = Path(path)

        if not config_path.exists():
            raise FileNotFoundError(
                f"Configuration file not found: {path}\n"
                f"Please create a configuration file or use get_default_config()"
            )

        try:
            with open(config_path, 'r') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Failed to parse YAML configuration file: {e}") from e

        if not data:
            raise ValueError(
                f"Configuration file is empty: {path}\n"
                f"Expected a '{CONFIG_SECTION}' section"
            )

        if not isinstance(data, dict) or CONFIG_SECTION not in data:
            raise ValueError(
                f"Configuration file missing '{CONFIG_SECTION}' section: {path}\n"
                f"Expected structure: {CONFIG_SECTION}:\n  fraction_digits: ...\n  datum: ..."
            )

        section = data[CONFIG_SECTION] or {}
        config = cls.from_dict(section)
        logger.info(
            "Loaded conversion config from %s (fraction_digits=%d, datum=%s)",
            config_path, config.fraction_digits, config.datum,
        )
        return config

    def to_dict(self) -> Dict[str, Any]:
        """Return the settings as a plain dict (inverse of from_dict)."""
        return {
            'fraction_digits': self.fraction_digits,
            'datum': getattr(self.datum, 'value', self.datum),
        }


def get_default_config() -> ConversionConfig:
    """Return the default configuration (3 fractional digits, wgs84)."""
    return ConversionConfig()
