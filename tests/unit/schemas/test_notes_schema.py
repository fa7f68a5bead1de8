"""
Unit tests for the note and folder schemas.
"""

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from noteful.core.schemas.common import first_error_message, format_timestamp, is_blank
from noteful.core.schemas.folders import FolderCreate, FolderResponse, FolderUpdate
from noteful.core.schemas.notes import NoteCreate, NoteResponse, NoteUpdate

VALID_NOTE = {
    "name": "Dogs",
    "modified": "2018-08-15T17:00:00.000Z",
    "folder_id": 1,
    "content": "This is a test note.",
}


def message_for(schema, data):
    with pytest.raises(ValidationError) as exc_info:
        schema.model_validate(data)
    return first_error_message(exc_info.value)


class TestNoteCreate:
    def test_valid_payload(self):
        note = NoteCreate.model_validate(VALID_NOTE)
        assert note.name == "Dogs"
        assert note.folder_id == 1
        assert note.modified == datetime(2018, 8, 15, 17, tzinfo=timezone.utc)

    @pytest.mark.parametrize("field", ["name", "modified", "folder_id", "content"])
    def test_missing_field_message(self, field):
        data = {k: v for k, v in VALID_NOTE.items() if k != field}
        assert message_for(NoteCreate, data) == f"'{field}' is required"

    def test_fields_checked_in_order(self):
        assert message_for(NoteCreate, {"content": "x", "folder_id": 1}) == "'name' is required"
        assert message_for(NoteCreate, {"name": "x", "content": "x"}) == "'modified' is required"

    def test_blank_string_is_missing(self):
        data = {**VALID_NOTE, "content": "  "}
        assert message_for(NoteCreate, data) == "'content' is required"

    def test_folder_id_string_is_coerced(self):
        note = NoteCreate.model_validate({**VALID_NOTE, "folder_id": "3"})
        assert note.folder_id == 3

    def test_bad_type_message_names_field(self):
        data = {**VALID_NOTE, "modified": "yesterday-ish"}
        assert message_for(NoteCreate, data).startswith("Invalid 'modified': ")

    def test_folder_id_bounds(self):
        assert NoteCreate.model_validate({**VALID_NOTE, "folder_id": 2**31 - 1}).folder_id == 2**31 - 1
        assert message_for(NoteCreate, {**VALID_NOTE, "folder_id": 2**31}).startswith(
            "Invalid 'folder_id'"
        )

    def test_text_keeps_ampersands(self):
        note = NoteCreate.model_validate({**VALID_NOTE, "name": "Tom & Jerry"})
        assert note.name == "Tom & Jerry"

    def test_naive_modified_is_utc(self):
        note = NoteCreate.model_validate({**VALID_NOTE, "modified": "2018-08-15T17:00:00"})
        assert note.modified.tzinfo == timezone.utc

    def test_text_is_sanitized(self):
        note = NoteCreate.model_validate({**VALID_NOTE, "name": "<script>x</script>"})
        assert note.name == "&lt;script&gt;x&lt;/script&gt;"

    def test_unknown_fields_dropped(self):
        note = NoteCreate.model_validate({**VALID_NOTE, "id": 99, "extra": True})
        assert "extra" not in note.model_dump()
        assert "id" not in note.model_dump()


class TestNoteUpdate:
    def test_only_supplied_fields_change(self):
        upd = NoteUpdate.model_validate({"name": "new", "fieldToIgnore": "x"})
        assert upd.changes() == {"name": "new"}

    def test_nulls_and_blanks_dropped(self):
        upd = NoteUpdate.model_validate({"name": None, "content": "", "folder_id": 2})
        assert upd.changes() == {"folder_id": 2}

    def test_nothing_recognized(self):
        assert message_for(NoteUpdate, {"irrelevantField": "foo"}) == (
            "Request body must contain either 'name', 'folder_id', 'content'"
        )

    def test_empty_body(self):
        assert message_for(NoteUpdate, {}).startswith("Request body must contain")

    def test_folder_id_beyond_integer_column(self):
        assert message_for(NoteUpdate, {"folder_id": 2**31}).startswith("Invalid 'folder_id'")

    def test_bad_folder_id(self):
        assert message_for(NoteUpdate, {"folder_id": "abc"}).startswith("Invalid 'folder_id'")


class TestNoteResponse:
    def test_modified_rendering(self):
        resp = NoteResponse(
            id=1,
            name="Dogs",
            modified=datetime(2018, 8, 15, 17),
            folder_id=1,
            content="c",
        )
        assert resp.model_dump(mode="json")["modified"] == "2018-08-15T17:00:00.000Z"

    def test_sanitizes_on_output(self):
        resp = NoteResponse(
            id=1,
            name="n",
            modified=datetime(2018, 8, 15, 17),
            folder_id=1,
            content='<a href="javascript:alert(1)" onclick="x()">link</a>',
        )
        assert "javascript" not in resp.content
        assert "onclick" not in resp.content
        assert resp.content.startswith("<a")


class TestFolderSchemas:
    def test_create_missing_name(self):
        assert message_for(FolderCreate, {}) == "Missing 'name' in request body"

    def test_create_valid(self):
        assert FolderCreate.model_validate({"name": "Work"}).name == "Work"

    def test_update_requires_name(self):
        assert message_for(FolderUpdate, {"other": 1}) == "Request body must contain 'name'"

    def test_update_changes(self):
        assert FolderUpdate.model_validate({"name": "New"}).changes() == {"name": "New"}

    def test_response_from_attributes(self):
        class Row:
            id = 4
            name = "Work"

        assert FolderResponse.model_validate(Row()).model_dump() == {"id": 4, "name": "Work"}


class TestHelpers:
    @pytest.mark.parametrize("value", [None, "", "   ", "\n"])
    def test_blank_values(self, value):
        assert is_blank(value)

    @pytest.mark.parametrize("value", [0, "x", False, []])
    def test_non_blank_values(self, value):
        assert not is_blank(value)

    def test_format_timestamp_converts_offsets(self):
        value = datetime(2021, 2, 13, 2, tzinfo=timezone(timedelta(hours=2)))
        assert format_timestamp(value) == "2021-02-13T00:00:00.000Z"
