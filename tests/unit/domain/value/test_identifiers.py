"""Unit tests for identifier parsing."""

from uuid import uuid4

import pytest

from quill.domain.error import InvalidIdError, ValidationError
from quill.domain.value import parse_comment_id, parse_journal_id


class TestParseIds:
    def test_parses_uuid_string(self):
        raw = uuid4()

        assert parse_journal_id(str(raw)) == raw

    @pytest.mark.parametrize("raw", ["", None, "not-a-uuid", "12345"])
    def test_rejects_malformed(self, raw):
        with pytest.raises(InvalidIdError) as exc_info:
            parse_comment_id(raw)

        assert str(exc_info.value) == "Invalid comment ID"

    def test_invalid_id_is_a_validation_error(self):
        with pytest.raises(ValidationError):
            parse_journal_id("nope")
