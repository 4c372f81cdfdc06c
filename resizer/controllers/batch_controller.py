"""Контроллер пакетной обработки: оркестрация поиска, фильтра и задач ресайза.

SOLID:
- SRP: `ResizeJob` ведёт один файл через open -> decode -> resize -> encode,
  `BatchController` только перебирает файлы и отчитывается.
- DIP: зависит от сервисов как от ролей; конкретные реализации подставляются.
Clean Code:
- Фатальные ошибки поднимаются исключением, восстановимые возвращаются
  как неуспешный `JobResult`; различие решает `ResizeError.severity`.
"""
from __future__ import annotations

import logging
import os
import sys
import time
from collections import deque
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Deque, Iterable, Iterator, List, Optional, TextIO

from resizer.errors import ResizeError
from resizer.models.config import ResizeConfig
from resizer.models.job_result import BatchSummary, JobResult
from resizer.services.discovery_service import discover_files
from resizer.services.filter_service import accept_extension
from resizer.services.image_service import ImageService
from resizer.services.naming_service import destination_for
from resizer.services.resize_service import ResizeService

logger = logging.getLogger(__name__)


@dataclass
class ResizeJob:
    """Обработка одного файла с изоляцией ошибок.

    Буфер изображения принадлежит одному вызову `run` и после записи
    отбрасывается. Фатальная ошибка (открытие/создание) пробрасывается,
    восстановимая (декодирование/кодирование) возвращается в `JobResult`.
    """
    config: ResizeConfig
    image_service: ImageService = field(default_factory=ImageService)
    resize_service: ResizeService = field(default_factory=ResizeService)

    def run(self, path: str) -> JobResult:
        try:
            return self._run(path)
        except ResizeError as exc:
            if exc.fatal:
                raise
            return JobResult.failure(path, exc)

    def _run(self, path: str) -> JobResult:
        start = time.perf_counter()

        with self.image_service.open_source(path) as source:
            image_data = self.image_service.decode(source, path)
        original_size = image_data.size

        resized = self.resize_service.resize(image_data.pil_image, self.config.width, self.config.height)
        resized_size = resized.size

        destination = destination_for(path, self.config)
        out = self.image_service.create_destination(destination)
        try:
            with out:
                self.image_service.encode(resized, out, destination)
        except ResizeError:
            _remove_partial(destination)
            raise
        elapsed = time.perf_counter() - start

        return JobResult.success(
            path=path,
            destination=destination,
            original_size=original_size,
            resized_size=resized_size,
            elapsed=elapsed,
        )


def _remove_partial(path: str) -> None:
    try:
        os.remove(path)
    except OSError as exc:
        logger.warning("Could not remove partial output %s: %s", path, exc)


@dataclass
class BatchController:
    """Перебирает найденные файлы и запускает для каждого `ResizeJob`.

    Ответственности:
    - Поиск файлов и фильтр по расширению (отклонённые пропускаются молча).
    - Последовательный запуск задач или пул из `config.workers` потоков;
      отчёт в обоих случаях идёт в порядке обнаружения.
    - Логирование восстановимых ошибок (если не `quiet`) и остановка на фатальной.
    """
    config: ResizeConfig
    job: Optional[ResizeJob] = None
    out: Optional[TextIO] = None

    def __post_init__(self) -> None:
        if self.job is None:
            self.job = ResizeJob(self.config)
        if self.out is None:
            self.out = sys.stdout

    def run(self, root: str) -> BatchSummary:
        """Обрабатывает все файлы под `root`.

        Raises:
            ResizeError: первая фатальная ошибка; оставшиеся файлы не обрабатываются.
        """
        files = discover_files(root)
        accepted = [path for path in files if accept_extension(path, self.config.force)]
        skipped = len(files) - len(accepted)
        if skipped:
            logger.debug("Skipped %d file(s) by extension", skipped)

        processed = failed = 0
        for result in self._results(accepted):
            if result.ok:
                processed += 1
                print(result.progress_line(), file=self.out, flush=True)
            else:
                failed += 1
                self._report_failure(result)

        summary = BatchSummary(processed=processed, failed=failed, skipped=skipped)
        logger.info(
            "Done: %d resized, %d failed, %d skipped",
            summary.processed,
            summary.failed,
            summary.skipped,
        )
        return summary

    def _report_failure(self, result: JobResult) -> None:
        if self.config.quiet:
            return
        logger.error("%s", result.error)

    def _results(self, paths: List[str]) -> Iterator[JobResult]:
        if self.config.workers == 1:
            for path in paths:
                yield self.job.run(path)
            return
        yield from self._pooled_results(paths)

    def _pooled_results(self, paths: Iterable[str]) -> Iterator[JobResult]:
        # At most 2 * workers jobs in flight; results are yielded in submission order.
        window = self.config.workers * 2
        pending: Deque[Future] = deque()
        with ThreadPoolExecutor(max_workers=self.config.workers, thread_name_prefix="resize") as pool:
            try:
                for path in paths:
                    pending.append(pool.submit(self.job.run, path))
                    if len(pending) >= window:
                        yield pending.popleft().result()
                while pending:
                    yield pending.popleft().result()
            finally:
                for future in pending:
                    future.cancel()
