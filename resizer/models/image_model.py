"""Модель декодированного изображения.

Принципы:
- SRP: только структура данных, без логики обработки.
- Чистый код: неизменяемость (`frozen=True`) для предсказуемости.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from PIL import Image


@dataclass(frozen=True)
class ImageData:
    """Декодированный растр и его метаданные.

    Принадлежит одной задаче ресайза и не разделяется между задачами.

    Fields:
        path: Путь к исходному файлу.
        pil_image: Загруженное изображение PIL.
        width: Ширина, px.
        height: Высота, px.
        mode: Режим PIL, например "RGB".
    """
    path: str
    pil_image: Image.Image
    width: int
    height: int
    mode: str

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height
