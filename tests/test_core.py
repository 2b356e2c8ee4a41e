from unittest.mock import MagicMock

import pytest
from pydantic import ValidationError
from sqlalchemy.dialects import mysql, postgresql

from judging.assignments.models import JudgeEvent
from judging.core.config import Settings
from judging.core.security import hash_password, verify_password
from judging.core.utils import insert_ignore, upsert
from judging.reviews.models import Review


def test_bcrypt_rounds_floor():
    with pytest.raises(ValidationError):
        Settings(DATABASE_URL="sqlite://", BCRYPT_ROUNDS=4)


def test_delete_policy_from_settings():
    assert Settings(DATABASE_URL="sqlite://", DELETE_POLICY="cascade").DELETE_POLICY.value == "cascade"


def test_password_hashing_round_trip():
    hashed = hash_password("correct horse", rounds=10)
    assert hashed.startswith("$2b$10$")
    assert verify_password("correct horse", hashed)
    assert not verify_password("battery staple", hashed)


def test_verify_against_malformed_hash():
    assert not verify_password("anything", "not-a-bcrypt-hash")


def _session_for(dialect_name):
    db = MagicMock()
    db.get_bind.return_value.dialect.name = dialect_name
    return db


def _compiled(db, dialect):
    stmt = db.execute.call_args[0][0]
    return str(stmt.compile(dialect=dialect))


def test_upsert_on_mysql_uses_on_duplicate_key():
    db = _session_for("mysql")
    upsert(db, Review, {"judge_id": "j1", "project_id": 1, "score": 5, "feedback": "ok"},
           conflict_columns=["judge_id", "project_id"], update_columns=["score", "feedback"])

    sql = _compiled(db, mysql.dialect())
    assert "ON DUPLICATE KEY UPDATE" in sql
    db.commit.assert_called_once()


def test_upsert_on_postgres_uses_on_conflict():
    db = _session_for("postgresql")
    upsert(db, Review, {"judge_id": "j1", "project_id": 1, "score": 5, "feedback": "ok"},
           conflict_columns=["judge_id", "project_id"], update_columns=["score", "feedback"])

    sql = _compiled(db, postgresql.dialect())
    assert "ON CONFLICT (judge_id, project_id) DO UPDATE" in sql


def test_insert_ignore_on_mysql():
    db = _session_for("mysql")
    insert_ignore(db, JudgeEvent, {"judge_id": "j1", "event_id": 1}, conflict_columns=["judge_id", "event_id"])

    assert _compiled(db, mysql.dialect()).startswith("INSERT IGNORE")


def test_unknown_dialect_is_rejected():
    with pytest.raises(NotImplementedError):
        insert_ignore(_session_for("oracle"), JudgeEvent, {"judge_id": "j1", "event_id": 1}, ["judge_id", "event_id"])
