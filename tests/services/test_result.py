"""Tests for ServiceResult and ServiceError."""

import json

import pytest
from pydantic import ValidationError

from npmctl.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="install", data={"command": "npm install"})
        assert result.ok is True
        assert result.op == "install"
        assert result.data == {"command": "npm install"}
        assert result.warnings == []
        assert result.error is None

    def test_error_construction(self) -> None:
        error = ServiceError(code="NO_LOCKFILE", message="No lockfile")
        result = ServiceResult(ok=False, op="install", error=error)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "NO_LOCKFILE"
        assert result.error.detail == {}

    def test_json_serialization(self) -> None:
        result = ServiceResult(ok=True, op="scripts", data={"count": 1})
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["op"] == "scripts"
        assert parsed["data"]["count"] == 1

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="test")
        with pytest.raises(ValidationError):
            result.ok = False  # type: ignore[misc]
