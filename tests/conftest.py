"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

import pytest

# 1. f4 e6 2. g4 Qh4# : Black mates White
FOOLS_MATE_UCI = ["f2f4", "e7e6", "g2g4", "d8h4"]

# 1. e4 e5 2. Qh5 Nc6 3. Bc4 Nf6 4. Qxf7# : White mates Black
SCHOLARS_MATE_UCI = ["e2e4", "e7e5", "d1h5", "b8c6", "f1c4", "g8f6", "h5f7"]


@pytest.fixture
def fools_mate() -> list[str]:
    return list(FOOLS_MATE_UCI)


@pytest.fixture
def scholars_mate() -> list[str]:
    return list(SCHOLARS_MATE_UCI)
