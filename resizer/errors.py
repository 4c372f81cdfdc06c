"""Ошибки пакетного ресайза и политика их серьёзности.

Принципы:
- Каждая ошибка несёт свой вид (`ErrorKind`); серьёзность решается один раз
  таблицей `SEVERITY_POLICY`, а не ветками управления по месту.
- Фатальная ошибка прерывает весь прогон, восстановимая пропускает один файл.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional


class Severity(Enum):
    FATAL = "fatal"
    RECOVERABLE = "recoverable"


class ErrorKind(Enum):
    NOT_FOUND = "not found"
    ACCESS_DENIED = "access denied"
    TRAVERSAL = "traversal"
    OPEN = "open"
    DECODE = "decode"
    CREATE = "create"
    ENCODE = "encode"


SEVERITY_POLICY = {
    ErrorKind.NOT_FOUND: Severity.FATAL,
    ErrorKind.ACCESS_DENIED: Severity.FATAL,
    ErrorKind.TRAVERSAL: Severity.FATAL,
    ErrorKind.OPEN: Severity.FATAL,
    ErrorKind.CREATE: Severity.FATAL,
    ErrorKind.DECODE: Severity.RECOVERABLE,
    ErrorKind.ENCODE: Severity.RECOVERABLE,
}


class ConfigError(ValueError):
    """Некорректная конфигурация запуска."""


class ResizeError(Exception):
    """Ошибка обработки, привязанная к пути и виду ошибки.

    Args:
        kind: Вид ошибки, по нему определяется серьёзность.
        path: Путь, на котором произошла ошибка (если известен).
        message: Человекочитаемое описание.
    """

    def __init__(self, kind: ErrorKind, path: Optional[str], message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.path = path
        self.message = message

    @property
    def severity(self) -> Severity:
        return SEVERITY_POLICY[self.kind]

    @property
    def fatal(self) -> bool:
        return self.severity is Severity.FATAL

    def __str__(self) -> str:
        if self.path is None:
            return self.message
        return f"{self.message} ({self.path})"
