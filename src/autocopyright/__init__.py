"""Rewrite copyright years in the footers of generated HTML files."""

__version__ = "1.0.0"

from .config import Config, load_config  # noqa: E402
from .exceptions import (  # noqa: E402
    AutoCopyrightError,
    ConfigError,
    DiscoveryError,
    FileProcessingError,
)
from .models import FileResult, FileStatus, RunResult  # noqa: E402
from .rewriter import CopyrightRewriter  # noqa: E402

__all__ = [
    "AutoCopyrightError",
    "Config",
    "ConfigError",
    "CopyrightRewriter",
    "DiscoveryError",
    "FileProcessingError",
    "FileResult",
    "FileStatus",
    "RunResult",
    "__version__",
    "load_config",
]
