from datetime import datetime, timezone

import pytest

from dermarec.services.scoring import ScoreEntry


# ── Fixed clocks: season detection never depends on wall time ───────────


@pytest.fixture
def july():
    return datetime(2024, 7, 15, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def january():
    return datetime(2024, 1, 15, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def make_entry():
    def _make(final: float, **parts) -> ScoreEntry:
        values = dict(skin=1.0, concern=0.0, safety=1.0, experience=1.0, budget=1.0)
        values.update(parts)
        return ScoreEntry(final=final, **values)

    return _make
