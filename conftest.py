import pytest

from living_chronicle.models import HistoricalEvent
from living_chronicle.storage import Storage


@pytest.fixture
def storage(tmp_path):
    """A fresh, empty storage tree per test."""
    return Storage(tmp_path / "data-tests")


@pytest.fixture
def make_event():
    """Build a HistoricalEvent with sensible defaults for the fields a test ignores."""
    counter = iter(range(1, 10_000))

    def _make(year=1, type="Military", category="Conflict", significance=2.5, **fields):
        fields.setdefault("id", f"e{next(counter):03d}")
        fields.setdefault("title", f"Event in year {year}")
        fields.setdefault("description", f"Something happened in year {year}.")
        return HistoricalEvent(
            year=year, type=type, category=category, significance=significance, **fields
        )

    return _make
