"""Start-year resolution and copyright string formatting.

Everything here is pure: the current year is always passed in, so the
rewrite logic can be exercised without touching files or the clock.
"""

import re
from datetime import date
from typing import Optional

from .config import YEAR_PLACEHOLDER, Config
from .exceptions import ConfigError

# First run of exactly four ASCII digits
_YEAR_RE = re.compile(r"(?<![0-9])[0-9]{4}(?![0-9])")


def current_year() -> int:
    """Return the calendar year from the local clock."""
    return date.today().year


def extract_year(content: Optional[str]) -> Optional[int]:
    """Return the first four-digit number in content, if any.

    The value is not range-checked: "Item #1234" yields 1234.
    """
    if not content:
        return None
    match = _YEAR_RE.search(content)
    return int(match.group(0)) if match else None


def resolve_start_year(
    existing_content: Optional[str], config: Config, current_year: int
) -> int:
    """Pick the start year: explicit config, then mined content, then now."""
    if config.start_year is not None:
        return config.start_year
    if config.preserve_start_year and existing_content is not None:
        mined = extract_year(existing_content)
        if mined is not None:
            return mined
    return current_year


def format_year(start_year: int, current_year: int, config: Config) -> str:
    """Render the year portion of the copyright line."""
    if config.format == "current":
        return str(current_year)
    if config.format == "range":
        if start_year == current_year:
            return str(current_year)
        return f"{start_year}{config.range_delimiter}{current_year}"
    raise ConfigError(f"Unknown format: {config.format!r}")


def render_template(formatted_year: str, template: str) -> str:
    """Substitute the first ${year} placeholder only."""
    return template.replace(YEAR_PLACEHOLDER, formatted_year, 1)
