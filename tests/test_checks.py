import pytest

from intervalgebra.checks import (
    PreconditionViolation,
    is_normalized,
    is_sorted,
    require_normalized,
    require_sorted,
)
from intervalgebra.config import Settings
from intervalgebra.interval import from_pairs


def test_is_sorted() -> None:
    assert is_sorted([])
    assert is_sorted(from_pairs([(1, 5), (1, 6), (2, 3)]))
    assert not is_sorted(from_pairs([(1, 6), (1, 5)]))


def test_is_normalized_rejects_touching_neighbours() -> None:
    assert is_normalized(from_pairs([(1, 2), (3, 4)]))
    assert not is_normalized(from_pairs([(1, 3), (3, 4)]))
    assert not is_normalized(from_pairs([(5, 6), (1, 2)]))


def test_checks_are_disabled_by_default() -> None:
    require_sorted(from_pairs([(5, 6), (1, 2)]), "op")
    require_normalized(from_pairs([(1, 3), (3, 4)]), "op")


def test_checks_raise_when_enabled(checked: None) -> None:
    with pytest.raises(PreconditionViolation, match=r"op\(\) requires"):
        require_sorted(from_pairs([(5, 6), (1, 2)]), "op")
    with pytest.raises(AssertionError):
        require_normalized(from_pairs([(1, 3), (3, 4)]), "op")


def test_settings_read_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("INTERVALGEBRA_CHECK_PRECONDITIONS", "true")

    assert Settings().check_preconditions is True


def test_settings_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("INTERVALGEBRA_CHECK_PRECONDITIONS", raising=False)

    assert Settings().check_preconditions is False
