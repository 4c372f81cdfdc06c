from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest
from PIL import Image


def _gradient(width: int, height: int) -> np.ndarray:
    xs = np.linspace(0, 255, num=width, dtype=np.float32)
    ys = np.linspace(0, 255, num=height, dtype=np.float32)
    red = np.tile(xs, (height, 1))
    green = np.tile(ys.reshape(-1, 1), (1, width))
    blue = np.full((height, width), 128, dtype=np.float32)
    return np.stack([red, green, blue], axis=-1).astype(np.uint8)


@pytest.fixture
def make_jpeg():
    """Writes a gradient JPEG of the given size and returns its path."""

    def _make(path: Path, width: int, height: int) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        Image.fromarray(_gradient(width, height)).save(path, format="JPEG")
        return path

    return _make


@pytest.fixture
def make_corrupt():
    def _make(path: Path, data: bytes = b"definitely not a jpeg") -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        return path

    return _make


@pytest.fixture
def workdir(tmp_path, monkeypatch) -> Path:
    """Empty working directory; flat output names are relative to it."""
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    return work
