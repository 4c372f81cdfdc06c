"""Изменение размеров растра.

Расчёт итоговых размеров повторяет соглашение исходного инструмента:
нулевой размер вычисляется по ненулевому с сохранением пропорций,
оба нуля означают тождественный ресайз.
"""
from __future__ import annotations

from typing import Tuple

from PIL import Image

RESAMPLE_FILTER = Image.Resampling.LANCZOS


def _scale_factors(width: int, height: int, old_width: int, old_height: int) -> Tuple[float, float]:
    if width == 0:
        if height == 0:
            return 1.0, 1.0
        scale = old_height / height
        return scale, scale
    scale_x = old_width / width
    scale_y = scale_x if height == 0 else old_height / height
    return scale_x, scale_y


def target_size(old_width: int, old_height: int, width: int, height: int) -> Tuple[int, int]:
    """Итоговые размеры для запрошенных `width`/`height` (0 — по пропорции)."""
    scale_x, scale_y = _scale_factors(width, height, old_width, old_height)
    # +0.7 before truncation, same rounding as the original resampler
    new_width = max(1, int(0.7 + old_width / scale_x))
    new_height = max(1, int(0.7 + old_height / scale_y))
    return new_width, new_height


class ResizeService:
    def resize(self, image: Image.Image, width: int, height: int) -> Image.Image:
        """Возвращает новое изображение; исходное не мутируется."""
        size = target_size(image.width, image.height, width, height)
        if size == image.size:
            return image.copy()
        return image.resize(size, RESAMPLE_FILTER)
