"""
Tests for the exception hierarchy and the DRF exception handler.

Run:  python -m pytest core/tests/test_exceptions.py -v
"""

from rest_framework.exceptions import NotFound as DRFNotFound

from core.exceptions import (
    ConflictError,
    NotFoundError,
    QuillError,
    ValidationError,
    quill_exception_handler,
)


class TestErrorPayloads:
    def test_base_defaults(self):
        err = QuillError()
        assert err.status_code == 500
        assert err.to_dict() == {"error": "server_error", "message": "An unexpected error occurred"}

    def test_not_found_carries_resource(self):
        err = NotFoundError("Post 1 does not exist", resource="post", id="1")
        assert err.status_code == 404
        assert err.to_dict()["detail"] == {"resource": "post", "id": "1"}

    def test_conflict(self):
        err = ConflictError("dup", resource="post", title="Hello")
        assert err.status_code == 409
        assert err.details["title"] == "Hello"

    def test_validation_field(self):
        err = ValidationError("bad", field="status")
        assert err.status_code == 400
        assert err.details == {"field": "status"}

    def test_str_is_message(self):
        assert str(ValidationError("bad input")) == "bad input"


class TestHandler:
    def test_quill_error_response(self):
        response = quill_exception_handler(ConflictError("dup", title="x"), {})
        assert response.status_code == 409
        assert response.data["error"] == "conflict"

    def test_falls_back_to_drf(self):
        response = quill_exception_handler(DRFNotFound(), {})
        assert response.status_code == 404

    def test_unhandled_returns_none(self):
        assert quill_exception_handler(RuntimeError("boom"), {"view": "v"}) is None
