"""Unit tests for the kernel error hierarchy."""

from __future__ import annotations

import json

import pytest

from livetable.config.validation import ConfigError
from livetable.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    UnknownSortFieldError,
    UnsupportedExportFormatError,
    ValidationError,
)


class TestBaseError:
    def test_message_is_stored(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"

    def test_default_code(self) -> None:
        assert BaseError("m").code == "base_error"

    def test_custom_code(self) -> None:
        assert BaseError("m", code="custom").code == "custom"

    def test_to_dict_basic(self) -> None:
        assert BaseError("m", detail={"k": 1}).to_dict() == {
            "code": "base_error",
            "message": "m",
            "detail": {"k": 1},
        }

    def test_cause_chained(self) -> None:
        cause = KeyError("x")
        err = BaseError("m", cause=cause)
        assert err.__cause__ is cause
        assert err.to_dict()["cause"] == repr(cause)

    def test_str_is_json(self) -> None:
        assert json.loads(str(BaseError("m")))["message"] == "m"

    def test_repr(self) -> None:
        assert repr(DomainError("rule")) == "DomainError(code='domain_error', message='rule')"


class TestHierarchy:
    @pytest.mark.parametrize(
        "err,parents",
        [
            (ValidationError("v"), (DomainError, BaseError)),
            (UnknownSortFieldError("x", ["id"]), (ValidationError, DomainError, BaseError)),
            (UnsupportedExportFormatError("docx", ["csv"]), (ValidationError, DomainError)),
            (ConfigError("c"), (ApplicationError, BaseError)),
        ],
    )
    def test_parents(self, err: BaseError, parents: tuple[type, ...]) -> None:
        for parent in parents:
            assert isinstance(err, parent)

    def test_validation_error_lists_errors(self) -> None:
        err = ValidationError("bad", errors=[{"param": "page"}])
        assert err.to_dict()["errors"] == [{"param": "page"}]

    def test_unknown_sort_field(self) -> None:
        err = UnknownSortFieldError("password", {"name", "id"})
        assert err.field == "password"
        assert err.allowed == ("id", "name")
        assert err.detail == {"field": "password"}
        assert "password" in err.message
        assert err.to_dict()["errors"] == [
            {"param": "sort_field", "value": "password", "allowed": ["id", "name"]}
        ]

    def test_unsupported_export_format(self) -> None:
        err = UnsupportedExportFormatError("docx", ["csv", "pdf"])
        assert err.file_type == "docx"
        assert err.supported == ("csv", "pdf")
        assert err.code == "unsupported_export_format"
