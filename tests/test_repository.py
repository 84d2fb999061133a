"""
Tests for OpeningRepository against a real SQLite session.
"""

import pytest
from sqlalchemy.exc import OperationalError

from app.crud.opening import OpeningRepository
from app.models.opening import Opening
from app.schemas.opening import OpeningRequest


@pytest.fixture
def repo(db_session):
    return OpeningRepository(db_session)


@pytest.fixture
def request_data():
    return OpeningRequest(
        role="Data Engineer",
        company="Initech",
        location="Austin, TX",
        remote=False,
        salary=90000,
    )


class TestOpeningRepository:

    def test_create_assigns_id(self, repo, request_data):
        opening = repo.create(request_data)

        assert opening.id is not None
        assert opening.role == "Data Engineer"
        assert opening.remote is False
        assert opening.created_at is not None
        assert repo.count() == 1

    def test_get_by_id(self, repo, request_data):
        opening = repo.create(request_data)

        assert repo.get_by_id(opening.id).company == "Initech"
        assert repo.get_by_id(opening.id + 1) is None

    def test_list_empty(self, repo):
        assert repo.list() == []

    def test_list_ordered_by_id(self, repo, request_data):
        created = [repo.create(request_data) for _ in range(3)]

        assert [o.id for o in repo.list()] == [o.id for o in created]

    def test_update_overwrites_fields(self, repo, request_data):
        opening = repo.create(request_data)

        updated = repo.update(opening, OpeningRequest(
            role="Analytics Engineer",
            company="Initech",
            location="Remote",
            remote=True,
        ))

        assert updated.id == opening.id
        assert updated.role == "Analytics Engineer"
        assert updated.remote is True
        assert updated.salary is None

    def test_delete_is_hard(self, repo, db_session, request_data):
        opening = repo.create(request_data)
        opening_id = opening.id

        repo.delete(opening)

        assert repo.get_by_id(opening_id) is None
        assert db_session.query(Opening).count() == 0

    def test_failed_commit_rolls_back(self, repo, db_session, request_data, monkeypatch):
        def failing_commit():
            raise OperationalError("COMMIT", {}, Exception("database is locked"))

        rolled_back = []
        monkeypatch.setattr(db_session, "commit", failing_commit)
        monkeypatch.setattr(db_session, "rollback", lambda: rolled_back.append(True))

        with pytest.raises(OperationalError):
            repo.create(request_data)

        assert rolled_back == [True]
