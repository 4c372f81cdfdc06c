"""Фильтр файлов по расширению."""
from __future__ import annotations

ALLOWED_EXTENSIONS = (".jpeg", ".jpg")


def accept_extension(path: str, force: bool = False) -> bool:
    """Принимает путь, если расширение (без учёта регистра) в списке или задан `force`."""
    if force:
        return True
    lowered = path.lower()
    return any(lowered.endswith(ext) for ext in ALLOWED_EXTENSIONS)
