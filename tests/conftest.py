"""Shared fixtures: small adjacency tables and loaded graphs."""

from __future__ import annotations

import pytest

from bordergraph import Graph


TRIANGLE = [
    ("A", "B", 10.0),
    ("B", "C", 5.0),
    ("A", "C", 8.0),
]

# Excerpt of capital-to-capital distances (km) between bordering countries
EUROPE = [
    ("Austria", "Germany", 523.0),
    ("Germany", "Austria", 523.0),
    ("Austria", "Italy", 765.0),
    ("Austria", "Switzerland", 685.0),
    ("France", "Germany", 878.0),
    ("France", "Switzerland", 435.0),
    ("France", "Spain", 1053.0),
    ("France", "Italy", 1106.0),
    ("Germany", "Switzerland", 753.0),
    ("Italy", "Switzerland", 690.0),
    ("Portugal", "Spain", 503.0),
    ("Spain", "Portugal", 503.0),
]

# Two components: {A, B, C} and {X, Y}
DISCONNECTED = TRIANGLE + [("X", "Y", 12.0)]


@pytest.fixture
def triangle() -> Graph:
    return Graph().create_edgelist(TRIANGLE)


@pytest.fixture
def europe() -> Graph:
    return Graph().create_edgelist(EUROPE)


@pytest.fixture
def disconnected() -> Graph:
    return Graph().create_edgelist(DISCONNECTED)
