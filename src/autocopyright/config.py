"""Configuration loading and validation."""

import codecs
import os
from dataclasses import dataclass
from datetime import date
from typing import Optional

import soupsieve
from dotenv import load_dotenv

from .exceptions import ConfigError

YEAR_PLACEHOLDER = "${year}"
FORMATS = ("range", "current")
MIN_START_YEAR = 1900

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


@dataclass(frozen=True)
class Config:
    """Copyright rewrite configuration.

    Validated once on construction; instances are immutable afterwards.
    """

    pattern: str = "**/*.html"
    footer_selector: str = "footer"
    copyright_selector: str = ".copyright"
    format: str = "range"
    range_delimiter: str = "-"
    start_year: Optional[int] = None
    preserve_start_year: bool = True
    template: str = "© ${year} Company Name"
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Validate option values."""
        if self.format not in FORMATS:
            raise ConfigError(
                f"Unknown format: {self.format!r}. Use 'range' or 'current'."
            )
        if not isinstance(self.template, str) or YEAR_PLACEHOLDER not in self.template:
            raise ConfigError(
                f"Template must be a string containing the {YEAR_PLACEHOLDER} placeholder."
            )
        if not isinstance(self.range_delimiter, str):
            raise ConfigError("range_delimiter must be a string.")
        if self.start_year is not None:
            this_year = date.today().year
            if isinstance(self.start_year, bool) or not isinstance(self.start_year, int):
                raise ConfigError(f"start_year must be an integer, got {self.start_year!r}.")
            if not MIN_START_YEAR <= self.start_year <= this_year:
                raise ConfigError(
                    f"start_year must be between {MIN_START_YEAR} and {this_year}, "
                    f"got {self.start_year}."
                )
        if not isinstance(self.pattern, str) or not self.pattern.strip():
            raise ConfigError("pattern cannot be empty.")
        for name in ("footer_selector", "copyright_selector"):
            _check_selector(name, getattr(self, name))
        try:
            codecs.lookup(self.encoding)
        except (LookupError, TypeError) as e:
            raise ConfigError(f"Unknown encoding: {self.encoding!r}.") from e


def _check_selector(name: str, selector: str) -> None:
    if not isinstance(selector, str) or not selector.strip():
        raise ConfigError(f"{name} cannot be empty.")
    try:
        soupsieve.compile(selector)
    except soupsieve.SelectorSyntaxError as e:
        raise ConfigError(f"Invalid {name} {selector!r}: {e}") from e


def _env_bool(name: str) -> Optional[bool]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigError(f"{name} must be a boolean (true/false), got {raw!r}.")


def _env_int(name: str) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw.strip())
    except ValueError as e:
        raise ConfigError(f"{name} must be an integer, got {raw!r}.") from e


def _pick(override: Optional[str], name: str) -> Optional[str]:
    """Explicit override, even an empty one, beats a non-empty env value."""
    if override is not None:
        return override
    return os.getenv(name) or None


def load_config(
    pattern: Optional[str] = None,
    footer_selector: Optional[str] = None,
    copyright_selector: Optional[str] = None,
    format: Optional[str] = None,
    range_delimiter: Optional[str] = None,
    start_year: Optional[int] = None,
    preserve_start_year: Optional[bool] = None,
    template: Optional[str] = None,
    encoding: Optional[str] = None,
) -> Config:
    """Load config from .env and apply overrides.

    Arguments left as None fall back to the matching AUTOCOPYRIGHT_*
    environment variable, then to the Config default.
    """
    load_dotenv()

    merged = {
        "pattern": _pick(pattern, "AUTOCOPYRIGHT_PATTERN"),
        "footer_selector": _pick(footer_selector, "AUTOCOPYRIGHT_FOOTER_SELECTOR"),
        "copyright_selector": _pick(copyright_selector, "AUTOCOPYRIGHT_COPYRIGHT_SELECTOR"),
        "format": _pick(format, "AUTOCOPYRIGHT_FORMAT"),
        "range_delimiter": range_delimiter
        if range_delimiter is not None
        else os.getenv("AUTOCOPYRIGHT_RANGE_DELIMITER"),
        "start_year": start_year
        if start_year is not None
        else _env_int("AUTOCOPYRIGHT_START_YEAR"),
        "preserve_start_year": preserve_start_year
        if preserve_start_year is not None
        else _env_bool("AUTOCOPYRIGHT_PRESERVE_START_YEAR"),
        "template": _pick(template, "AUTOCOPYRIGHT_TEMPLATE"),
        "encoding": _pick(encoding, "AUTOCOPYRIGHT_ENCODING"),
    }

    return Config(**{key: value for key, value in merged.items() if value is not None})
