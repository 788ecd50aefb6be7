"""Find the output files a run should rewrite."""

import glob
import os
from pathlib import Path

from .exceptions import DiscoveryError


def discover_files(output_root: Path, pattern: str) -> list[Path]:
    """Return files under output_root matching the glob pattern, sorted.

    Args:
        output_root: Build output directory.
        pattern: Glob relative to output_root; ``**`` matches any depth.

    Raises:
        DiscoveryError: If output_root is not a readable directory or the
            glob itself fails.
    """
    output_root = Path(output_root)
    if not output_root.is_dir():
        raise DiscoveryError(f"Output directory not found: {output_root}")
    if not os.access(output_root, os.R_OK | os.X_OK):
        raise DiscoveryError(f"Output directory is not readable: {output_root}")

    # root_dir keeps glob metacharacters in the root path literal
    try:
        matches = glob.glob(pattern, root_dir=output_root, recursive=True)
    except (OSError, ValueError) as e:
        raise DiscoveryError(
            f"Error finding files matching {pattern} in {output_root}: {e}"
        ) from e

    paths = (output_root / m for m in matches)
    return sorted(p for p in paths if p.is_file())
