"""Результаты обработки файлов.

`JobResult` создаётся в конце одной задачи ресайза, сразу потребляется
контроллером для отчёта и нигде не сохраняется.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from resizer.errors import ResizeError


def format_duration(seconds: float) -> str:
    """Форматирует длительность в стиле `1.5ms` / `230µs` / `2.1s`."""
    if seconds < 1e-3:
        return f"{seconds * 1e6:.0f}µs"
    if seconds < 1.0:
        return f"{seconds * 1e3:.3f}ms"
    return f"{seconds:.3f}s"


@dataclass(frozen=True)
class JobResult:
    path: str
    destination: Optional[str] = None
    original_size: Optional[Tuple[int, int]] = None
    resized_size: Optional[Tuple[int, int]] = None
    elapsed: float = 0.0
    error: Optional[ResizeError] = None

    @classmethod
    def success(
        cls,
        path: str,
        destination: str,
        original_size: Tuple[int, int],
        resized_size: Tuple[int, int],
        elapsed: float,
    ) -> "JobResult":
        return cls(
            path=path,
            destination=destination,
            original_size=original_size,
            resized_size=resized_size,
            elapsed=elapsed,
        )

    @classmethod
    def failure(cls, path: str, error: ResizeError, **partial) -> "JobResult":
        return cls(path=path, error=error, **partial)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def fatal(self) -> bool:
        return self.error is not None and self.error.fatal

    def progress_line(self) -> str:
        ow, oh = self.original_size
        nw, nh = self.resized_size
        return f"Resizing {self.path} {ow}x{oh} -> {nw}x{nh} in {format_duration(self.elapsed)}"


@dataclass(frozen=True)
class BatchSummary:
    """Итог прогона: обработано, с ошибками, отфильтровано по расширению."""
    processed: int = 0
    failed: int = 0
    skipped: int = 0

    @property
    def total(self) -> int:
        return self.processed + self.failed + self.skipped
