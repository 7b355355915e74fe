import pytest

from intervalgebra.config import settings


@pytest.fixture
def checked(monkeypatch: pytest.MonkeyPatch) -> None:
    """Enable debug precondition checks for the duration of a test."""
    monkeypatch.setattr(settings, "check_preconditions", True)
