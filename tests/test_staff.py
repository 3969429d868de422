import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session

from dvdrental.entities import Staff, create_schema
from dvdrental.repository import RecordNotFoundError
from dvdrental.staff import StaffRepository


@pytest.fixture
def session():
    engine = create_engine("sqlite://")
    create_schema(engine)
    with Session(engine) as s:
        yield s
    engine.dispose()


@pytest.fixture
def repo(session):
    return StaffRepository(session)


def _staff(first, last, username, store_id=1, active=True):
    return Staff(
        store_id=store_id,
        first_name=first,
        last_name=last,
        email=f"{username}@example.com",
        username=username,
        address="1 Main St",
        district="Downtown",
        city="Anytown",
        country="USA",
        postal_code="12345",
        phone="555-0000",
        active=active,
    )


@pytest.fixture
def populated(repo):
    repo.create(_staff("John", "Doe", "jdoe", store_id=1))
    repo.create(_staff("Jane", "Smith", "jsmith", store_id=1))
    repo.create(_staff("Bob", "Johnson", "bjohnson", store_id=2, active=False))
    return repo


def test_create_and_find_by_id(repo):
    staff = repo.create(_staff("John", "Doe", "jdoe"))
    found = repo.find_by_id(staff.staff_id)
    assert found.username == "jdoe"
    assert found.active is True


def test_find_by_id_not_found(repo):
    with pytest.raises(RecordNotFoundError):
        repo.find_by_id(999)


def test_find_by_name_matches_first_or_last(populated):
    names = {(s.first_name, s.last_name) for s in populated.find_by_name("John")}
    assert names == {("John", "Doe"), ("Bob", "Johnson")}


def test_find_by_name_no_match(populated):
    assert populated.find_by_name("Zed") == []


def test_find_by_email(populated):
    staff = populated.find_by_email("jsmith@example.com")
    assert staff.email == "jsmith@example.com"
    assert staff.username == "jsmith"


def test_find_by_email_not_found(populated):
    with pytest.raises(RecordNotFoundError):
        populated.find_by_email("nobody@example.com")


def test_find_by_username(populated):
    assert populated.find_by_username("bjohnson").last_name == "Johnson"


def test_find_by_username_not_found(populated):
    with pytest.raises(RecordNotFoundError):
        populated.find_by_username("ghost")


def test_find_by_store(populated):
    staff = populated.find_by_store(1)
    assert len(staff) == 2
    assert all(s.store_id == 1 for s in staff)


def test_active_and_inactive_partition(populated):
    active = populated.find_active()
    inactive = populated.find_inactive()
    assert all(s.active for s in active)
    assert not any(s.active for s in inactive)
    assert len(active) + len(inactive) == len(populated.find_all())
    assert [s.username for s in inactive] == ["bjohnson"]


def test_soft_deleted_staff_hidden(populated):
    jane = populated.find_by_username("jsmith")
    populated.delete(jane)
    with pytest.raises(RecordNotFoundError):
        populated.find_by_username("jsmith")
    assert all(s.username != "jsmith" for s in populated.find_active())