"""Pytest fixtures for wallrnd tests."""

import pytest
import random
import sys
from pathlib import Path

# Add repository root to path for imports
ROOT_DIR = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT_DIR))

from wallrnd.color import Color, Chooser
from wallrnd.config import SceneConfig
from wallrnd.geometry import Frame
from wallrnd.scene import Pattern
from wallrnd.tiling import Tiling


@pytest.fixture
def rng() -> random.Random:
    """Return a seeded random generator."""
    return random.Random(1234)


@pytest.fixture
def frame() -> Frame:
    """Return a small landscape frame."""
    return Frame(200, 120)


@pytest.fixture
def theme() -> Chooser:
    """Return a two-color theme."""
    chooser = Chooser()
    chooser.push(Color(200, 40, 40), 3)
    chooser.push(Color(40, 40, 200), 1)
    return chooser


@pytest.fixture
def scene_config(frame, theme) -> SceneConfig:
    """Return a small scene configuration."""
    return SceneConfig(
        theme=theme,
        weight=2,
        deviation=10,
        frame=frame,
        pattern=Pattern.FREE_CIRCLES,
        tiling=Tiling.HEXAGONS,
        nb_pattern=6,
        var_stripes=10,
        size_tiling=10.0,
        nb_delaunay=50,
        width_pattern=0.2,
    )
