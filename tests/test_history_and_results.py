# /tests/test_history_and_results.py

import pytest
from datetime import timedelta
from sqlalchemy.exc import OperationalError

from app.models.history_model import SaveResultRequest
from app.services import history_service, results_service
from app.services.service_errors import InvalidInputError, StorageError


@pytest.fixture
def complete_payload():
    return {
        "generationId": None,
        "transcript": "Full transcript of the episode.",
        "finalDescription": "An edited description.\n\nWith two paragraphs. ✨",
        "finalThumbnailTitle": "DON'T DO THIS",
        "finalVideoTitle": "Why You Should Never Skip Leg Day",
        "finalTags": "fitness, legs,  gym ",
    }


def _save(db_service, payload):
    return results_service.save_result(SaveResultRequest.model_validate(payload), db_service)


# --- Save Service ---

def test_save_result_returns_stored_row(db_service, complete_payload):
    saved = _save(db_service, complete_payload)

    assert isinstance(saved.id, int)
    assert saved.generation_id is None
    assert saved.created_at is not None
    assert saved.final_video_title == complete_payload["finalVideoTitle"]


@pytest.mark.parametrize("missing_field", [
    "transcript", "finalDescription", "finalThumbnailTitle", "finalVideoTitle", "finalTags",
])
def test_save_result_rejects_each_missing_field(mock_db_service, complete_payload, missing_field):
    payload = dict(complete_payload)
    del payload[missing_field]

    with pytest.raises(InvalidInputError) as exc_info:
        _save(mock_db_service, payload)

    assert missing_field in exc_info.value.detail
    mock_db_service.add_saved_result.assert_not_called()


@pytest.mark.parametrize("missing_field", [
    "transcript", "finalDescription", "finalThumbnailTitle", "finalVideoTitle", "finalTags",
])
def test_save_result_rejects_each_blank_field(mock_db_service, complete_payload, missing_field):
    payload = dict(complete_payload, **{missing_field: "   "})

    with pytest.raises(InvalidInputError):
        _save(mock_db_service, payload)


def test_save_result_storage_failure_raises_storage_error(mock_db_service, complete_payload):
    mock_db_service.add_saved_result.side_effect = OperationalError("INSERT", {}, Exception("db down"))

    with pytest.raises(StorageError):
        _save(mock_db_service, complete_payload)


# --- History Service ---

def test_history_is_newest_first(db_service, complete_payload):
    for i in range(4):
        _save(db_service, dict(complete_payload, finalVideoTitle=f"Title {i}"))

    history = history_service.get_history(db_service)

    assert [r.final_video_title for r in history] == ["Title 3", "Title 2", "Title 1", "Title 0"]
    timestamps = [r.created_at for r in history]
    assert timestamps == sorted(timestamps, reverse=True)


def test_history_limit_zero_is_empty(db_service, complete_payload):
    _save(db_service, complete_payload)

    assert history_service.get_history(db_service, limit="0") == []


def test_history_limit_and_offset(db_service, complete_payload):
    for i in range(5):
        _save(db_service, dict(complete_payload, finalVideoTitle=f"Title {i}"))

    page = history_service.get_history(db_service, limit="2", offset="1")

    assert [r.final_video_title for r in page] == ["Title 3", "Title 2"]


def test_history_round_trip_preserves_final_fields(db_service, complete_payload):
    saved = _save(db_service, complete_payload)

    [fetched] = history_service.get_history(db_service)

    assert fetched.id == saved.id
    assert fetched.final_description == complete_payload["finalDescription"]
    assert fetched.final_thumbnail_title == complete_payload["finalThumbnailTitle"]
    assert fetched.final_video_title == complete_payload["finalVideoTitle"]
    assert fetched.final_tags == complete_payload["finalTags"]


def test_history_read_failure_raises_storage_error(mock_db_service):
    mock_db_service.get_saved_results.side_effect = OperationalError("SELECT", {}, Exception("gone"))

    with pytest.raises(StorageError):
        history_service.get_history(mock_db_service)


@pytest.mark.parametrize("raw, expected", [
    (None, 50),
    ("10", 10),
    (" 7 ", 7),
    ("20abc", 20),
    ("3.9", 3),
    ("abc", 50),
    ("", 50),
    ("-5", 50),
    (0, 0),
])
def test_parse_int_param(raw, expected):
    assert history_service.parse_int_param(raw, 50) == expected


def test_non_numeric_params_fall_back_to_defaults(mock_db_service):
    mock_db_service.get_saved_results.return_value = []

    history_service.get_history(mock_db_service, limit="lots", offset="later")

    mock_db_service.get_saved_results.assert_called_once_with(limit=50, offset=0)


# --- Generation Links ---

def test_save_result_for_unknown_generation_is_storage_error(db_service, complete_payload):
    with pytest.raises(StorageError) as exc_info:
        _save(db_service, dict(complete_payload, generationId=987654))

    assert exc_info.value.status_code == 500
    assert history_service.get_history(db_service) == []


def test_save_result_linked_to_generation(db_service, complete_payload):
    generation = db_service.add_generation_record({
        "transcript": "t",
        "description": "d",
        "thumbnail_title": "TH",
        "video_title": "one",
        "tags": "x",
        "title_options": ["one", "two", "three", "four", "five"],
    })

    saved = _save(db_service, dict(complete_payload, generationId=generation.id))

    assert saved.generation_id == generation.id


def test_history_timestamps_carry_utc_offset(db_service, db_session, complete_payload):
    _save(db_service, complete_payload)
    db_session.expunge_all()

    [row] = history_service.get_history(db_service)

    assert row.created_at.tzinfo is not None
    assert row.created_at.utcoffset() == timedelta(0)
