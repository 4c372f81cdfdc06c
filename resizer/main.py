"""Точка входа в приложение."""
from __future__ import annotations

import logging
import sys
from typing import List, Optional

from resizer.cli import build_parser
from resizer.controllers.batch_controller import BatchController
from resizer.errors import ConfigError, ResizeError
from resizer.models.config import ResizeConfig

logger = logging.getLogger("resizer")


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Разбирает аргументы, собирает конфигурацию и запускает пакетную обработку.

    Returns:
        0 после обработки всех файлов (ошибки декодирования не влияют),
        1 при фатальной ошибке. Ошибки аргументов завершают процесс с кодом 2.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    _setup_logging(args.verbose)

    try:
        config = ResizeConfig.from_namespace(args)
    except ConfigError as exc:
        parser.error(str(exc))

    controller = BatchController(config)
    try:
        controller.run(args.path)
    except ResizeError as exc:
        logger.critical("Fatal %s error: %s", exc.kind.value, exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
