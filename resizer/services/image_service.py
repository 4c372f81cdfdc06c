"""Чтение и запись JPEG на диске.

Принципы:
- SRP: класс отвечает только за кодек и файловые потоки, без логики ресайза.
- Каждая ошибка оборачивается в `ResizeError` своего вида; решение,
  прерывать ли прогон, принимает политика в `resizer.errors`.
"""
from __future__ import annotations

import os
from typing import BinaryIO

from PIL import Image, UnidentifiedImageError

from resizer.errors import ErrorKind, ResizeError
from resizer.models.image_model import ImageData

JPEG_FORMAT = "JPEG"
# Modes the JPEG encoder accepts as is
_JPEG_MODES = {"1", "L", "RGB", "CMYK"}


class ImageService:
    def open_source(self, path: str) -> BinaryIO:
        """Открывает исходный файл на чтение.

        Raises:
            ResizeError: `OPEN` (фатальная), если файл не открывается.
        """
        try:
            return open(path, "rb")
        except OSError as exc:
            raise ResizeError(ErrorKind.OPEN, path, f"Error opening file: {exc.strerror or exc}") from exc

    def decode(self, stream: BinaryIO, path: str) -> ImageData:
        """Декодирует JPEG из потока и возвращает его вместе с метаданными.

        Args:
            stream: Открытый бинарный поток.
            path: Путь источника, для сообщений и метаданных.

        Returns:
            `ImageData` с полностью загруженным `PIL.Image.Image`.

        Raises:
            ResizeError: `DECODE` (восстановимая), если данные не являются корректным JPEG.
        """
        try:
            pil_image = Image.open(stream, formats=[JPEG_FORMAT])
            pil_image.load()
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError, SyntaxError, ValueError) as exc:
            raise ResizeError(ErrorKind.DECODE, path, f"Error decoding file: {exc}") from exc

        width, height = pil_image.size
        return ImageData(
            path=path,
            pil_image=pil_image,
            width=width,
            height=height,
            mode=pil_image.mode,
        )

    def create_destination(self, path: str) -> BinaryIO:
        """Создаёт (или обрезает) файл назначения, недостающие каталоги создаются.

        Raises:
            ResizeError: `CREATE` (фатальная), если файл не создаётся.
        """
        try:
            parent = os.path.dirname(path)
            if parent:
                os.makedirs(parent, exist_ok=True)
            return open(path, "wb")
        except OSError as exc:
            raise ResizeError(ErrorKind.CREATE, path, f"Creating output file failed: {exc.strerror or exc}") from exc

    def encode(self, image: Image.Image, stream: BinaryIO, path: str) -> None:
        """Кодирует изображение в JPEG с качеством по умолчанию.

        Raises:
            ResizeError: `ENCODE` (восстановимая), если запись не удалась.
        """
        if image.mode not in _JPEG_MODES:
            image = image.convert("RGB")
        try:
            image.save(stream, format=JPEG_FORMAT)
            stream.flush()
        except (OSError, ValueError) as exc:
            raise ResizeError(ErrorKind.ENCODE, path, f"Error encoding file: {exc}") from exc
