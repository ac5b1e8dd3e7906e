"""Shared test fixtures for polycast."""

import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from polycast.defaults import cube_vertices, dodecahedron_vertices
from polycast.hull import build_polytope
from polycast.model import RenderStyle


@pytest.fixture
def dodeca_vertices():
    """The canonical 20-point dodecahedron at the default 0.5 scale."""
    return dodecahedron_vertices(0.5)


@pytest.fixture
def dodecahedron(dodeca_vertices):
    """Base face planes of the default dodecahedron."""
    return build_polytope(dodeca_vertices)


@pytest.fixture
def cube():
    """Base face planes of the cube ``[-1, 1]^3``."""
    return build_polytope(cube_vertices(1.0))


@pytest.fixture
def small_style():
    """An 80x60 frame with the solid roughly a third of the height."""
    return RenderStyle(width=80, height=60, screen_scale=30.0)


@pytest.fixture
def rng():
    return np.random.default_rng(20240613)
