"""
Shared pytest fixtures for the test suite.

Provides a handful of domains with known footprints: boxes, a wedge that
widens from a point, a wedge that pinches to a point and a domain with no
depth at all.
"""

import math

import pytest

from domainmesh import Domain


@pytest.fixture
def unit_cube():
    return Domain.box()


@pytest.fixture
def slab():
    """Box of 2 x 1 footprint and unit height."""
    return Domain.box(x=(0, 2), z=(0, 1), y=(0, 1))


@pytest.fixture
def widening_wedge():
    """Triangle footprint 0 <= z <= x on [0, 1], starting from a point."""
    return Domain(
        x=(lambda: 0.0, lambda: 1.0),
        z=(lambda x: 0.0, lambda x: x),
        y=(lambda x, z: 0.0, lambda x, z: 1.0),
    )


@pytest.fixture
def pinched_wedge():
    """Triangle footprint 0 <= z <= 1 - x on [0, 1], ending in a point."""
    return Domain(
        x=(lambda: 0.0, lambda: 1.0),
        z=(lambda x: 0.0, lambda x: 1.0 - x),
        y=(lambda x, z: 0.0, lambda x, z: 1.0),
    )


@pytest.fixture
def hill():
    """Curved terrain over a footprint that narrows and widens."""
    return Domain(
        x=(lambda: -1.0, lambda: 2.0),
        z=(lambda x: -1.0 - 0.3 * math.sin(x), lambda x: 1.0 + 0.5 * x * x),
        y=(
            lambda x, z: -2.0 + 0.1 * x,
            lambda x, z: 1.0 + 0.4 * math.cos(x) * math.sin(z),
        ),
    )


@pytest.fixture
def flat_domain():
    """Domain whose back and front boundaries coincide everywhere."""
    return Domain(
        x=(lambda: 0.0, lambda: 1.0),
        z=(lambda x: 0.5, lambda x: 0.5),
        y=(lambda x, z: 0.0, lambda x, z: 1.0),
    )
