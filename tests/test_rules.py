import numpy as np
import pytest

from crossflip.rules import (
    CROSS,
    EXCLUDE_PIVOT,
    INCLUDE_PIVOT_CANCEL,
    build_effect_matrix,
    coords,
    flip_mask,
    index,
    normalize_rule,
)


def test_exclude_pivot_flips_row_and_column_only():
    mask = flip_mask(3, 4, 1, 2)
    expected = np.array(
        [
            [0, 0, 1, 0],
            [1, 1, 0, 1],
            [0, 0, 1, 0],
        ],
        dtype=np.uint8,
    )
    assert np.array_equal(mask, expected)


def test_include_pivot_cancel_is_same_net_effect():
    for r in range(3):
        for c in range(4):
            assert np.array_equal(
                flip_mask(3, 4, r, c, EXCLUDE_PIVOT),
                flip_mask(3, 4, r, c, INCLUDE_PIVOT_CANCEL),
            )


def test_cross_rule_flips_pivot_once():
    mask = flip_mask(2, 2, 0, 0, CROSS)
    assert mask.tolist() == [[1, 1], [1, 0]]


def test_unknown_rule_rejected():
    with pytest.raises(ValueError):
        normalize_rule("diagonal")
    assert normalize_rule(None) == EXCLUDE_PIVOT


def test_effect_matrix_columns_are_flip_masks():
    A = build_effect_matrix(3, 4)
    for r in range(3):
        for c in range(4):
            j = index(4, r, c)
            assert np.array_equal(A[:, j], flip_mask(3, 4, r, c).reshape(-1))
    # pressing a cell never changes that cell
    assert not np.diag(A).any()
    assert np.array_equal(A, A.T)


def test_cross_matrix_is_involution_on_even_boards():
    A = build_effect_matrix(4, 4, CROSS).astype(int)
    assert np.array_equal((A @ A) % 2, np.eye(16, dtype=int))


def test_index_coords_bijection():
    seen = {index(5, r, c) for r in range(3) for c in range(5)}
    assert seen == set(range(15))
    assert coords(5, index(5, 2, 3)) == (2, 3)
