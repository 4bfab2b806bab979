from datetime import datetime, timezone

import pytest
from sqlalchemy.exc import IntegrityError

import jobboard.repos.application_repo as arepo
import jobboard.repos.portfolio_repo as prepo
import jobboard.repos.position_repo as posrepo
import jobboard.repos.profile_repo as profrepo
import jobboard.repos.revoked_token_repo as rtrepo
import jobboard.repos.skill_repo as srepo
import jobboard.repos.user_repo as urepo
from jobboard.models.application import ApplicationStatus
from jobboard.models.user import UserRole


class _Query:
    def __init__(self, data, updated=1):
        self.data = data
        self.updated = updated

    def filter(self, *args, **kwargs):
        return self

    def order_by(self, *args, **kwargs):
        return self

    def options(self, *args, **kwargs):
        return self

    def join(self, *args, **kwargs):
        return self

    def all(self):
        return self.data if isinstance(self.data, list) else [self.data]

    def first(self):
        if isinstance(self.data, list):
            return self.data[0] if self.data else None
        return self.data

    def delete(self, synchronize_session=False):
        return 2

    def update(self, values, synchronize_session=False):
        return self.updated


class _DB:
    def __init__(self, data=None, updated=1, fail_commit=False):
        self.data = data
        self.updated = updated
        self.fail_commit = fail_commit
        self.added = []
        self.deleted = []
        self.committed = 0
        self.rolled_back = 0

    def query(self, *args):
        return _Query(self.data, self.updated)

    def add(self, obj):
        self.added.append(obj)

    def delete(self, obj):
        self.deleted.append(obj)

    def commit(self):
        if self.fail_commit:
            raise IntegrityError("INSERT", {}, Exception("duplicate"))
        self.committed += 1

    def rollback(self):
        self.rolled_back += 1

    def refresh(self, obj):
        return None


def test_user_repo_create_and_delete(monkeypatch):
    db = _DB()
    monkeypatch.setattr(urepo, "generate_id", lambda: "u1")
    monkeypatch.setattr(urepo, "hash_password", lambda p: "hashed")
    user = urepo.create(db, "Ann", "ann@example.com", "secret1", UserRole.SEEKER)
    assert user.id == "u1"
    assert user.role == "Society"
    assert user.password_hash == "hashed"
    assert db.committed == 1

    monkeypatch.setattr(urepo, "get_by_id", lambda db, uid: user)
    assert urepo.delete_user(db, "u1") is True
    assert db.deleted == [user]
    monkeypatch.setattr(urepo, "get_by_id", lambda db, uid: None)
    assert urepo.delete_user(db, "missing") is False


def test_user_repo_create_duplicate_rolls_back(monkeypatch):
    db = _DB(fail_commit=True)
    monkeypatch.setattr(urepo, "hash_password", lambda p: "hashed")
    with pytest.raises(IntegrityError):
        urepo.create(db, "Ann", "ann@example.com", "secret1", UserRole.SEEKER)
    assert db.rolled_back == 1


def test_revoked_token_repo_add_duplicate_returns_false():
    assert rtrepo.add(_DB(), "tok", datetime(2099, 1, 1, tzinfo=timezone.utc)) is True
    db = _DB(fail_commit=True)
    assert rtrepo.add(db, "tok", datetime(2099, 1, 1, tzinfo=timezone.utc)) is False
    assert db.rolled_back == 1
    assert rtrepo.purge_expired(_DB(), datetime.now(timezone.utc)) == 2


def test_profile_repo_update_rejects_unknown_fields():
    company = type("C", (), {"name": ""})()
    db = _DB()
    profrepo.update_company(db, company, {"name": "Acme"})
    assert company.name == "Acme"
    with pytest.raises(ValueError):
        profrepo.update_company(db, company, {"user_id": "other"})
    with pytest.raises(ValueError):
        profrepo.update_society(db, company, {"logo_url": "x"})


def test_portfolio_repo_create_update_delete(monkeypatch):
    db = _DB()
    monkeypatch.setattr(prepo, "generate_id", lambda: "p1")
    item = prepo.create(db, "s1", ["python"], "desc", "https://x/f.pdf")
    assert item.id == "p1"
    assert item.file_name == "f.pdf"
    prepo.update(db, item, {"description": "new"})
    assert item.description == "new"
    with pytest.raises(ValueError):
        prepo.update(db, item, {"society_id": "s2"})
    prepo.delete(db, item)
    assert db.deleted == [item]


def test_position_repo_create_is_active(monkeypatch):
    db = _DB()
    monkeypatch.setattr(posrepo, "generate_id", lambda: "pos1")
    start = datetime(2024, 1, 1, tzinfo=timezone.utc)
    end = datetime(2024, 2, 1, tzinfo=timezone.utc)
    position = posrepo.create(db, "c1", "Engineer", 2, "Build things", start, end)
    assert position.id == "pos1"
    assert position.is_active is True
    assert posrepo.list_open(_DB(data=[position]), datetime.now(timezone.utc)) == [position]


def test_application_repo_create_and_conditional_update(monkeypatch):
    db = _DB()
    monkeypatch.setattr(arepo, "generate_id", lambda: "a1")
    app_row = arepo.create(db, "pos1", "s1", "p1", "hello")
    assert app_row.status == ApplicationStatus.PENDING.value
    assert arepo.set_status_if_pending(_DB(updated=1), "a1", ApplicationStatus.ACCEPTED) is True
    assert arepo.set_status_if_pending(_DB(updated=0), "a1", ApplicationStatus.REJECTED, "late") is False


def test_application_repo_duplicate_rolls_back():
    db = _DB(fail_commit=True)
    with pytest.raises(IntegrityError):
        arepo.create(db, "pos1", "s1", "p1")
    assert db.rolled_back == 1


def test_skill_repo_create_and_search():
    skill = srepo.create(_DB(), "Python")
    assert skill.name == "Python"
    assert srepo.search(_DB(data=[skill]), "  py ") == [skill]
    assert srepo.get_by_name_ci(_DB(data=None), "python") is None
