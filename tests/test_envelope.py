"""Tests for response envelope decoding."""

from vocabsync.core.envelope import decode_notepad_envelope, decode_vocabulary_envelope


class TestNotepadEnvelope:
    def test_success_with_notepad(self):
        env = decode_notepad_envelope({"success": True, "data": {"notepad": {"content": "x"}}})
        assert env.ok is True
        assert env.notepad == {"content": "x"}

    def test_success_without_data(self):
        env = decode_notepad_envelope({"success": True})
        assert env.ok is True
        assert env.notepad is None

    def test_failure_reason_uses_msg(self):
        env = decode_notepad_envelope({"success": False, "msg": "notepad not found"})
        assert env.ok is False
        assert env.failure_reason() == "notepad not found"

    def test_failure_reason_falls_back_to_body(self):
        env = decode_notepad_envelope({"success": False, "errors": [{"code": "x"}]})
        assert env.failure_reason() == '{"success": false, "errors": [{"code": "x"}]}'

    def test_non_dict_body(self):
        env = decode_notepad_envelope("<html>oops</html>")
        assert env.ok is False
        assert env.failure_reason() == "<html>oops</html>"

    def test_empty_body(self):
        env = decode_notepad_envelope(None)
        assert env.ok is False
        assert env.failure_reason() == "no response data"

    def test_truthy_non_bool_success_is_failure(self):
        assert decode_notepad_envelope({"success": "yes"}).ok is False


class TestVocabularyEnvelope:
    def test_code_zero_is_success(self):
        assert decode_vocabulary_envelope({"code": 0, "data": {}}).ok is True

    def test_nonzero_code(self):
        env = decode_vocabulary_envelope({"code": 40001, "msg": "word not found"})
        assert env.ok is False
        assert env.failure_reason() == "word not found"

    def test_missing_code(self):
        assert decode_vocabulary_envelope({"data": {}}).ok is False

    def test_success_field_is_ignored(self):
        assert decode_vocabulary_envelope({"success": True}).ok is False

    def test_bool_code_is_not_zero(self):
        assert decode_vocabulary_envelope({"code": False}).ok is False
