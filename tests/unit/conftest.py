"""
Unit test fixtures. Services run against the in-memory DB from the root conftest.
"""
from datetime import datetime

import pytest


@pytest.fixture
def start_date():
    return datetime(2024, 1, 1, 9, 0, 0)


@pytest.fixture
def weekly_progress(db_session, user, start_date):
    """Growing Speaker enrollment started on 2024-01-01."""
    from cringeshield.models.models import WeeklyProgress

    progress = WeeklyProgress(user_id=user.id, selected_tier="growing_speaker", start_date=start_date)
    db_session.add(progress)
    db_session.commit()
    db_session.refresh(progress)
    return progress
