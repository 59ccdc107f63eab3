"""Tests for artifact error types.

These tests ensure each error carries a readable message plus structured
data, and still belongs to the builtin exception family callers expect.
"""

from __future__ import annotations

import pytest

from ionio.errors import ArtifactError, ConstructorInputNotFoundError, EncodingError, FormatError


class TestArtifactErrorTypes:
    def test_artifact_error_to_dict(self) -> None:
        error = ArtifactError("Test error", data={"key": "value"})
        d = error.to_dict()

        assert d["error"] == "ArtifactError"
        assert d["message"] == "Test error"
        assert d["data"] == {"key": "value"}

    def test_not_found_error(self) -> None:
        error = ConstructorInputNotFoundError("owner", ["sum"])
        d = error.to_dict()

        assert isinstance(error, LookupError)
        assert str(error) == 'Constructor input "owner" not found'
        assert d["data"] == {"name": "owner", "available": ["sum"]}

    def test_encoding_error(self) -> None:
        error = EncodingError("pubkey", "expected 33 bytes, got 2")

        assert isinstance(error, ValueError)
        assert str(error) == "cannot encode argument as pubkey: expected 33 bytes, got 2"
        assert error.to_dict()["data"]["type"] == "pubkey"

    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            (None, "missing required field 'asm'"),
            ("a.json", "a.json: missing required field 'asm'"),
        ],
    )
    def test_format_error_message(self, source: str | None, expected: str) -> None:
        error = FormatError("missing required field 'asm'", source)

        assert isinstance(error, ValueError)
        assert str(error) == expected
        assert error.reason == "missing required field 'asm'"
