from __future__ import annotations

import pytest

from iro.collect import take_exact


def test_take_exact_returns_first_n_items() -> None:
    assert take_exact([1, 2, 3], 3) == (1, 2, 3)
    assert take_exact(range(10), 4) == (0, 1, 2, 3)
    assert take_exact([], 0) == ()


def test_take_exact_fails_distinguishably_when_short() -> None:
    assert take_exact([1, 2], 3) is None
    assert take_exact(iter([]), 1) is None


def test_take_exact_leaves_remainder_unconsumed() -> None:
    it = iter(range(5))
    assert take_exact(it, 2) == (0, 1)
    assert list(it) == [2, 3, 4]


def test_take_exact_rejects_negative_n() -> None:
    with pytest.raises(ValueError):
        take_exact([1], -1)
