import sqlite3

import pytest

from portfolio_models import DEFAULT_NAME, DEFAULT_PROFILE_IMAGE_URL, Profile, Resume
from record_store import SQLiteRecordStore, StoreError


def test_find_one_on_empty_store_returns_none(store):
    assert store.find_one(Profile) is None
    assert store.find_one(Resume) is None
    assert store.count(Profile) == 0


def test_create_fills_defaults_and_timestamps(store):
    profile = store.create(Profile, {"name": "Someone"})

    assert profile.id is not None
    assert profile.name == "Someone"
    assert profile.profile_image_url == DEFAULT_PROFILE_IMAGE_URL
    assert profile.created_at is not None
    assert profile.created_at == profile.updated_at

    found = store.find_one(Profile)
    assert found.id == profile.id
    assert found.name == "Someone"
    assert found.created_at == profile.created_at


def test_save_persists_mutation_and_bumps_updated_at(store):
    profile = store.create(Profile, {})
    created_at = profile.created_at

    profile.title = "Site Reliability Engineer"
    store.save(profile)

    found = store.find_one(Profile)
    assert found.title == "Site Reliability Engineer"
    assert found.name == DEFAULT_NAME
    assert found.created_at == created_at
    assert found.updated_at >= created_at
    assert store.count(Profile) == 1


def test_fetched_record_is_not_live(store):
    store.create(Profile, {})
    profile = store.find_one(Profile)
    profile.name = "Unsaved"

    assert store.find_one(Profile).name == DEFAULT_NAME


def test_resume_round_trips_binary_payload(store):
    payload = b"%PDF-1.4\n\x00\xff\x10binary"
    store.create(Resume, {"name": "Resume.pdf", "data": payload, "content_type": "application/pdf"})

    resume = store.find_one(Resume)
    assert resume.data == payload
    assert resume.content_type == "application/pdf"
    assert resume.upload_date is not None


def test_find_one_returns_oldest_record(store):
    store.create(Profile, {"name": "First"})
    store.create(Profile, {"name": "Second"})

    assert store.find_one(Profile).name == "First"
    assert store.count(Profile) == 2


def test_constraint_violation_is_a_store_error(store):
    with pytest.raises(StoreError):
        store.create(Profile, {"profile_image_url": ""})
    with pytest.raises(StoreError):
        store.create(Resume, {"name": "Resume.pdf"})

    assert store.count(Profile) == 0


def test_save_without_create_is_a_store_error(store):
    with pytest.raises(StoreError):
        store.save(Profile())


def test_sqlite_store_creates_directory(tmp_path):
    store = SQLiteRecordStore(tmp_path / "nested" / "dir" / "portfolio.db")
    store.connect()

    assert store.db_path.exists()
    with sqlite3.connect(store.db_path) as conn:
        tables = {r[0] for r in conn.execute("SELECT name FROM sqlite_master WHERE type='table'")}
    assert {"profiles", "resumes"} <= tables


def test_sqlite_store_unreachable_path(tmp_path):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("x")
    store = SQLiteRecordStore(blocker / "portfolio.db")

    with pytest.raises(StoreError):
        store.connect()
    with pytest.raises(StoreError):
        store.find_one(Profile)


def test_sqlite_store_without_tables(tmp_path):
    store = SQLiteRecordStore(tmp_path / "portfolio.db")

    with pytest.raises(StoreError):
        store.find_one(Profile)
