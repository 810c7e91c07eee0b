"""Test setup for argtex."""

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

HEADER = "[config]\ntitle: Logic exercises\nauthor: A. Student\ndate: 2024-03-01\n"


@pytest.fixture
def header() -> str:
    """A valid config block."""
    return HEADER


@pytest.fixture
def sheet() -> str:
    """A complete exercise sheet with two sections."""
    return (
        HEADER
        + "\n"
        + "# Modus ponens\n"
        + "1: P -> Q\n"
        + "2: P\n"
        + "|- Q\n"
        + "\n"
        + "# Quantifiers\n"
        + "1: @x (Man(x) -> Mortal(x))\n"
        + "2: Man(socrates) [UI 1]\n"
        + "|- Mortal(socrates)\n"
    )
