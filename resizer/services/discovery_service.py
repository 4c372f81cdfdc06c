"""Поиск файлов-кандидатов по корневому пути.

Принципы:
- SRP: модуль только классифицирует путь и разворачивает его в список файлов.
- Ошибки классификации и обхода фатальны: без них файлы найти невозможно,
  частичные результаты не возвращаются.
- Каталоги в результат не попадают: их нельзя декодировать как изображение,
  а попытка открыть каталог была бы фатальной ошибкой открытия.
"""
from __future__ import annotations

import logging
import os
import stat
from enum import Enum
from typing import List

from resizer.errors import ErrorKind, ResizeError

logger = logging.getLogger(__name__)


class PathKind(Enum):
    FILE = "file"
    DIRECTORY = "directory"


def classify_path(path: str) -> PathKind:
    """Определяет, файл это или каталог.

    Raises:
        ResizeError: `NOT_FOUND`, если пути нет; `ACCESS_DENIED`, если stat невозможен.
    """
    try:
        st = os.stat(path)
    except FileNotFoundError as exc:
        raise ResizeError(ErrorKind.NOT_FOUND, path, "Input path does not exist") from exc
    except OSError as exc:
        raise ResizeError(ErrorKind.ACCESS_DENIED, path, f"Cannot stat input path: {exc.strerror or exc}") from exc

    if stat.S_ISDIR(st.st_mode):
        return PathKind.DIRECTORY
    # devices, fifos etc. are treated as files, decoding will reject them
    logger.debug("Classified %s as file (mode=%o)", path, st.st_mode)
    return PathKind.FILE


def _walk(root: str) -> List[str]:
    errors: List[OSError] = []
    files: List[str] = []
    for dirpath, dirnames, filenames in os.walk(root, onerror=errors.append):
        dirnames.sort()
        for name in sorted(filenames):
            files.append(os.path.join(dirpath, name))
    if errors:
        err = errors[0]
        raise ResizeError(
            ErrorKind.TRAVERSAL,
            err.filename or root,
            f"Listing files failed: {err.strerror or err}",
        ) from err
    return files


def discover_files(root: str) -> List[str]:
    """Разворачивает корневой путь в упорядоченный список файлов.

    Для файла возвращается `[root]`. Для каталога выполняется полный рекурсивный
    обход: в каждом каталоге сначала его файлы по алфавиту, затем подкаталоги
    по алфавиту. Порядок детерминирован для одного и того же дерева.
    """
    if classify_path(root) is PathKind.FILE:
        return [root]
    files = _walk(root)
    logger.debug("Discovered %d file(s) under %s", len(files), root)
    return files
