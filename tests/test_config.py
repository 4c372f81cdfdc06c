import argparse
from pathlib import Path

import pytest

from resizer.errors import ConfigError
from resizer.models.config import ResizeConfig


@pytest.mark.parametrize(
    "width, height, prefix, expected",
    [
        (150, 0, "", "150"),
        (0, 80, "", "80"),
        (150, 80, "", "150"),
        (150, 0, "out", "out"),
    ],
)
def test_effective_prefix(width, height, prefix, expected):
    assert ResizeConfig(width=width, height=height, prefix=prefix).effective_prefix == expected


def test_both_dimensions_zero_is_rejected():
    with pytest.raises(ConfigError):
        ResizeConfig(width=0, height=0)


@pytest.mark.parametrize("kwargs", [{"width": -1}, {"width": 10, "height": -5}, {"width": 10, "workers": 0}])
def test_invalid_values_are_rejected(kwargs):
    with pytest.raises(ConfigError):
        ResizeConfig(**kwargs)


def test_config_is_immutable():
    config = ResizeConfig(width=10)
    with pytest.raises(AttributeError):
        config.width = 20


def test_from_namespace():
    ns = argparse.Namespace(
        width=0, height=64, prefix="", force=True, quiet=True, output_root="thumbs", workers=3
    )
    config = ResizeConfig.from_namespace(ns)
    assert config == ResizeConfig(
        height=64, force=True, quiet=True, output_root=Path("thumbs"), workers=3
    )
