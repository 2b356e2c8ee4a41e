from unittest.mock import MagicMock

import pytest

from judging.core.config import settings
from judging.core.errors import InvalidScore
from judging.reviews.models import Review
from judging.reviews.services.review_service import ReviewService
from judging.reviews.services.score_validator import ScoreValidator

API = settings.API_PREFIX


@pytest.fixture
def project_id(create_event, register_student, create_project, create_judge):
    create_judge("j1")
    create_judge("j2")
    return create_project(create_event("Hack1"), register_student(), title="P1")


def test_resubmission_overwrites_review(api_client, project_id, submit_review, session_maker):
    resp = submit_review("j1", project_id, 5, "ok")
    assert resp.status_code == 200
    assert resp.json() == {"message": "Review saved"}

    assert submit_review("j1", project_id, 8, "better").status_code == 200

    with session_maker() as db:
        reviews = db.query(Review).filter_by(judge_id="j1", project_id=project_id).all()
    assert [(r.score, r.feedback) for r in reviews] == [(8, "better")]


def test_reviews_from_different_judges_are_kept(project_id, submit_review, session_maker):
    submit_review("j1", project_id, 5, "ok")
    submit_review("j2", project_id, 9, "great")

    with session_maker() as db:
        assert db.query(Review).filter_by(project_id=project_id).count() == 2


def test_review_for_missing_project(submit_review, create_judge):
    create_judge("j1")

    resp = submit_review("j1", 404, 5)
    assert resp.status_code == 404
    assert resp.json() == {"error": "Project not found"}


def test_review_score_must_be_integer(project_id, submit_review):
    resp = submit_review("j1", project_id, "lots")
    assert resp.status_code == 400
    assert resp.json()["error"].startswith("score")


def test_unbounded_scores_pass_through(project_id, submit_review, session_maker):
    assert submit_review("j1", project_id, -3).status_code == 200
    assert submit_review("j2", project_id, 1000).status_code == 200

    with session_maker() as db:
        assert sorted(r.score for r in db.query(Review).all()) == [-3, 1000]


def test_configured_score_bounds(project_id, submit_review, monkeypatch):
    monkeypatch.setattr(settings, "SCORE_MIN", 0)
    monkeypatch.setattr(settings, "SCORE_MAX", 100)

    resp = submit_review("j1", project_id, 101)
    assert resp.status_code == 400
    assert resp.json() == {"error": "Score must be at most 100"}

    assert submit_review("j1", project_id, 100).status_code == 200


@pytest.mark.parametrize(
    "minimum,maximum,score,ok",
    [
        (None, None, -50, True),
        (0, None, -1, False),
        (None, 10, 10, True),
        (None, 10, 11, False),
        (1, 5, 3, True),
    ],
)
def test_score_validator(minimum, maximum, score, ok):
    validator = ScoreValidator(minimum, maximum)
    if ok:
        assert validator.validate(score) == score
    else:
        with pytest.raises(InvalidScore):
            validator.validate(score)


def test_score_validator_rejects_inverted_bounds():
    with pytest.raises(ValueError):
        ScoreValidator(10, 1)


def test_empty_project_list_skips_the_query():
    db = MagicMock()
    service = ReviewService(db, score_validator=ScoreValidator())

    assert service.list_reviews_for_projects([]) == {}
    db.query.assert_not_called()
    db.execute.assert_not_called()


def test_reviews_grouped_by_project(db):
    from judging.events.models import Event
    from judging.judges.models import Judge
    from judging.projects.models import Project
    from judging.students.models import Student

    # No relationship() between the models, so parents are committed before the projects that reference them
    db.add_all([Event(id=1, name="Hack1"), Student(id=1, name="S", email="s@x.com", password="x"), Judge(id="j1", password="x")])
    db.commit()
    db.add_all([Project(id=1, title="A", event_id=1, user_id=1), Project(id=2, title="B", event_id=1, user_id=1)])
    db.commit()

    service = ReviewService(db, score_validator=ScoreValidator())
    service.submit_review("j1", 1, 3, "meh")

    grouped = service.list_reviews_for_projects([1, 2])
    assert list(grouped) == [1]
    assert grouped[1][0].feedback == "meh"
