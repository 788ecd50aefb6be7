"""Data models for autocopyright."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


class FileStatus:
    """Outcome of processing one file."""

    UPDATED = "updated"
    UNCHANGED = "unchanged"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass
class FileResult:
    """What happened to a single matched file."""

    path: Path
    status: str  # updated, unchanged, skipped, failed
    message: str = ""
    before: Optional[str] = None  # copyright inner markup as found
    after: Optional[str] = None  # copyright inner markup as written


@dataclass
class RunResult:
    """Aggregated outcome of one rewrite run.

    A RunResult only exists for runs whose discovery succeeded, so the run
    as a whole succeeded even when individual files were skipped or failed;
    had_errors tells whether any file failed.
    """

    output_root: Path
    current_year: int
    files: list[FileResult] = field(default_factory=list)
    dry_run: bool = False

    def _with_status(self, status: str) -> list[FileResult]:
        return [f for f in self.files if f.status == status]

    @property
    def updated(self) -> list[FileResult]:
        return self._with_status(FileStatus.UPDATED)

    @property
    def unchanged(self) -> list[FileResult]:
        return self._with_status(FileStatus.UNCHANGED)

    @property
    def skipped(self) -> list[FileResult]:
        return self._with_status(FileStatus.SKIPPED)

    @property
    def failed(self) -> list[FileResult]:
        return self._with_status(FileStatus.FAILED)

    @property
    def warnings(self) -> list[str]:
        return [f.message for f in self.skipped]

    @property
    def errors(self) -> list[str]:
        return [f.message for f in self.failed]

    @property
    def had_errors(self) -> bool:
        return bool(self.failed)
