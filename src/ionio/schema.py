"""Schema types and validators for artifact documents.

This module provides TypedDict definitions mirroring the persisted JSON shape
and a validation function that rejects documents missing required fields
before they reach the dataclass model.
"""

from __future__ import annotations

from typing import Any, TypedDict

from ionio.errors import FormatError


class ParameterJson(TypedDict):
    """Schema for a constructor or function input."""

    name: str
    type: str


class FunctionJson(TypedDict):
    """Schema for a single callable function."""

    name: str
    functionInputs: list[ParameterJson]
    require: list[dict[str, Any]]  # opaque requirement records
    asm: list[str]


class ArtifactJson(TypedDict):
    """Schema for a whole artifact document."""

    contractName: str
    constructorInputs: list[ParameterJson]
    functions: list[FunctionJson]


def _require_field(obj: dict[str, Any], field: str, expected_type: type, where: str) -> Any:
    if field not in obj:
        raise FormatError(f"{where}: missing required field '{field}'")
    value = obj[field]
    if not isinstance(value, expected_type):
        raise FormatError(f"{where}.{field}: expected {expected_type.__name__}, got {type(value).__name__}")
    return value


def _validate_parameters(params: list[Any], where: str) -> None:
    seen: set[str] = set()
    for i, param in enumerate(params):
        loc = f"{where}[{i}]"
        if not isinstance(param, dict):
            raise FormatError(f"{loc}: must be an object")
        name = _require_field(param, "name", str, loc)
        _require_field(param, "type", str, loc)
        if name in seen:
            raise FormatError(f"{loc}.name: duplicate parameter name {name!r}")
        seen.add(name)


def validate_artifact_json(data: Any) -> None:
    """Validate an artifact document against ArtifactJson.

    Raises FormatError with a descriptive location if validation fails.
    Unknown extra fields are allowed and ignored.
    """
    if not isinstance(data, dict):
        raise FormatError(f"document: expected object, got {type(data).__name__}")

    _require_field(data, "contractName", str, "artifact")
    constructor_inputs = _require_field(data, "constructorInputs", list, "artifact")
    functions = _require_field(data, "functions", list, "artifact")

    _validate_parameters(constructor_inputs, "constructorInputs")

    for i, fn in enumerate(functions):
        loc = f"functions[{i}]"
        if not isinstance(fn, dict):
            raise FormatError(f"{loc}: must be an object")
        _require_field(fn, "name", str, loc)
        function_inputs = _require_field(fn, "functionInputs", list, loc)
        _require_field(fn, "require", list, loc)
        asm = _require_field(fn, "asm", list, loc)

        _validate_parameters(function_inputs, f"{loc}.functionInputs")
        for j, token in enumerate(asm):
            if not isinstance(token, str):
                raise FormatError(f"{loc}.asm[{j}]: must be a string, got {type(token).__name__}")
