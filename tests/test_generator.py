import numpy as np
import pytest

from crossflip.errors import InvalidDimensionError
from crossflip.generator import default_steps, shuffle


def test_shuffle_is_reproducible():
    a = shuffle(4, 5, rng=np.random.default_rng(3))
    b = shuffle(4, 5, rng=np.random.default_rng(3))
    assert a == b
    assert a.moves == 0
    assert np.array_equal(a.state, a.initial)


def test_shuffle_zero_steps_is_empty():
    board = shuffle(3, 3, rng=np.random.default_rng(0), steps=0)
    assert board.count_on() == 0


def test_shuffle_replays_its_presses():
    rng = np.random.default_rng(11)
    board = shuffle(3, 4, rng=rng, steps=1)
    # a single press flips its row and column, pivot excluded
    assert board.count_on() == 3 + 4 - 2


def test_default_steps():
    assert default_steps(2, 2) == 8
    assert default_steps(12, 12) == 72


def test_shuffle_validation():
    with pytest.raises(InvalidDimensionError):
        shuffle(1, 5)
    with pytest.raises(ValueError):
        shuffle(3, 3, steps=-1)
