"""Конфигурация запуска.

Принципы:
- SRP: только параметры и их валидация, без логики обработки.
- Неизменяемость (`frozen=True`): конфигурация собирается один раз и передаётся
  во все компоненты явно, глобального состояния нет.
"""
from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from resizer.errors import ConfigError


@dataclass(frozen=True)
class ResizeConfig:
    """Параметры одного запуска.

    Fields:
        width: Целевая ширина, px; 0 — вычислить по высоте с сохранением пропорций.
        height: Целевая высота, px; 0 — вычислить по ширине.
        prefix: Префикс имени выходного файла; пустой — берётся ненулевой размер.
        force: Обрабатывать файлы с любым расширением.
        quiet: Не логировать восстановимые ошибки.
        output_root: Если задан, результаты кладутся под этот каталог с сохранением структуры.
        workers: Размер пула обработчиков; 1 — строго последовательно.
    """
    width: int = 0
    height: int = 0
    prefix: str = ""
    force: bool = False
    quiet: bool = False
    output_root: Optional[Path] = None
    workers: int = 1

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ConfigError(f"width and height must be non-negative, got {self.width}x{self.height}")
        if self.width == 0 and self.height == 0:
            raise ConfigError("at least one of width or height must be nonzero")
        if self.workers < 1:
            raise ConfigError(f"workers must be at least 1, got {self.workers}")

    @property
    def effective_prefix(self) -> str:
        if self.prefix:
            return self.prefix
        if self.width == 0:
            return str(self.height)
        return str(self.width)

    @classmethod
    def from_namespace(cls, ns: argparse.Namespace) -> "ResizeConfig":
        output_root = Path(ns.output_root) if ns.output_root else None
        return cls(
            width=ns.width,
            height=ns.height,
            prefix=ns.prefix or "",
            force=ns.force,
            quiet=ns.quiet,
            output_root=output_root,
            workers=ns.workers,
        )
