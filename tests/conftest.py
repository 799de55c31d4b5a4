import os
import sys

import matplotlib

matplotlib.use("Agg")

import numpy as np  # noqa: E402
import pytest  # noqa: E402

# Ensure src and the repo root are on path for test imports
ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
SRC = os.path.join(ROOT, "src")
for path in (SRC, ROOT):
    if path not in sys.path:
        sys.path.insert(0, path)

from crossflip.board import BoardState  # noqa: E402
from tests.helpers import SAMPLE_4X4  # noqa: E402


@pytest.fixture
def sample_board():
    return BoardState.from_matrix(SAMPLE_4X4)


@pytest.fixture
def rng():
    return np.random.default_rng(1234)
