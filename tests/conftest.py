import pytest

from assessment.models import AssessmentState, TRACK_IDS, empty_milestone_map


@pytest.fixture
def tmp_db(tmp_path, monkeypatch):
    db_path = str(tmp_path / "test_snowflake.db")
    monkeypatch.setattr("assessment.store.DB_PATH", db_path)
    from assessment.store import init_db
    init_db()
    return db_path


@pytest.fixture
def sample_state():
    milestones = empty_milestone_map()
    milestones.update({"UX_WRITING": 3, "PROTOTYPING": 5, "UX_LEADERSHIP": 1})
    return AssessmentState(
        name="Jane Doe, PhD",
        title="UX Designer #2",
        milestone_by_track=milestones,
        focused_track_id="UX_LEADERSHIP",
    )


@pytest.fixture
def first_track_state():
    return AssessmentState(focused_track_id=TRACK_IDS[0])


@pytest.fixture
def last_track_state():
    return AssessmentState(focused_track_id=TRACK_IDS[-1])


@pytest.fixture
def two_tier_resolver():
    """Everyone is a 'Novice'; 10 or more milestone levels in total also unlock 'Expert'."""

    def resolver(milestone_by_track):
        if sum(milestone_by_track.values()) >= 10:
            return ["Expert", "Novice"]
        return ["Novice"]

    return resolver


@pytest.fixture
def no_titles_resolver():
    return lambda milestone_by_track: []
