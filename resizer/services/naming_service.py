"""Имена выходных файлов.

Две схемы:
- плоская (по умолчанию): `prefix + "_" + source`, путь источника берётся как есть,
  результат относителен текущему каталогу. Файлы с одинаковым именем в разных
  подкаталогах при этом могут перезаписать друг друга, если префикс задаёт путь;
- зеркальная (`output_root`): структура каталогов источника повторяется под
  выходным корнем, коллизий по базовому имени нет.
"""
from __future__ import annotations

from pathlib import Path, PurePath

from resizer.models.config import ResizeConfig


def output_path(source: str, prefix: str) -> str:
    return prefix + "_" + source


def mirrored_output_path(source: str, output_root: Path, prefix: str = "") -> Path:
    """Путь под `output_root`, повторяющий структуру `source`.

    Абсолютный источник привязывается к корню выходного каталога без
    диска/корня; `..` в относительном пути отбрасываются, чтобы результат
    не выходил за пределы `output_root`.
    """
    src = PurePath(source)
    relative = src.parts[1:] if src.anchor else src.parts
    parts = [p for p in relative if p != ".."]
    if not parts:
        raise ValueError(f"Cannot derive output name from {source!r}")
    name = parts[-1]
    if prefix:
        name = f"{prefix}_{name}"
    return Path(output_root, *parts[:-1], name)


def destination_for(source: str, config: ResizeConfig) -> str:
    if config.output_root is not None:
        return str(mirrored_output_path(source, config.output_root, config.prefix))
    return output_path(source, config.effective_prefix)
