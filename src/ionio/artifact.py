"""
Artifact model: the in-memory form of a compiled contract description.

Artifacts are frozen values built from tuples. Transformations return new
artifacts and may share untouched functions with their input.
"""

from __future__ import annotations

import copy
import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ionio.constants import ARTIFACT_JSON_INDENT, PLACEHOLDER_PREFIX
from ionio.errors import FormatError
from ionio.schema import ArtifactJson, FunctionJson, ParameterJson, validate_artifact_json

logger = logging.getLogger(__name__)

# Requirement records are opaque JSON objects carried through unread
Requirement = dict[str, Any]


@dataclass(frozen=True)
class Parameter:
    name: str
    type: str

    @classmethod
    def from_dict(cls, d: ParameterJson) -> Parameter:
        return cls(name=d["name"], type=d["type"])

    def to_dict(self) -> ParameterJson:
        return {"name": self.name, "type": self.type}


@dataclass(frozen=True)
class ArtifactFunction:
    name: str
    function_inputs: tuple[Parameter, ...] = ()
    # records are private deep copies, excluded from the hash since dicts are unhashable
    require: tuple[Requirement, ...] = field(default=(), hash=False)
    asm: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "require", tuple(copy.deepcopy(r) for r in self.require))

    @classmethod
    def from_dict(cls, d: FunctionJson) -> ArtifactFunction:
        return cls(
            name=d["name"],
            function_inputs=tuple(Parameter.from_dict(p) for p in d["functionInputs"]),
            require=tuple(d["require"]),
            asm=tuple(d["asm"]),
        )

    def to_dict(self) -> FunctionJson:
        return {
            "name": self.name,
            "functionInputs": [p.to_dict() for p in self.function_inputs],
            "require": copy.deepcopy(list(self.require)),
            "asm": list(self.asm),
        }


@dataclass(frozen=True)
class Artifact:
    contract_name: str
    constructor_inputs: tuple[Parameter, ...] = ()
    functions: tuple[ArtifactFunction, ...] = ()

    @classmethod
    def from_dict(cls, d: Any) -> Artifact:
        """
        Build an Artifact from a parsed JSON document.

        Raises:
            FormatError: If the document does not match ArtifactJson.
        """
        validate_artifact_json(d)
        return cls(
            contract_name=d["contractName"],
            constructor_inputs=tuple(Parameter.from_dict(p) for p in d["constructorInputs"]),
            functions=tuple(ArtifactFunction.from_dict(f) for f in d["functions"]),
        )

    def to_dict(self) -> ArtifactJson:
        return {
            "contractName": self.contract_name,
            "constructorInputs": [p.to_dict() for p in self.constructor_inputs],
            "functions": [f.to_dict() for f in self.functions],
        }

    def constructor_input(self, name: str) -> Parameter | None:
        for p in self.constructor_inputs:
            if p.name == name:
                return p
        return None

    def constructor_input_names(self) -> list[str]:
        return [p.name for p in self.constructor_inputs]

    def placeholders(self) -> list[str]:
        """Distinct placeholder tokens used by any function, in first-seen order."""
        seen: dict[str, None] = {}
        for f in self.functions:
            for token in f.asm:
                if token.startswith(PLACEHOLDER_PREFIX):
                    seen.setdefault(token, None)
        return list(seen)


def artifact_from_json(text: str, *, source: str | None = None) -> Artifact:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise FormatError(f"JSON parse error at line {e.lineno} column {e.colno}: {e.msg}", source) from e
    try:
        return Artifact.from_dict(data)
    except FormatError as e:
        if source is None:
            raise
        raise FormatError(e.reason, source) from e


def artifact_to_json(artifact: Artifact, *, indent: int = ARTIFACT_JSON_INDENT) -> str:
    return json.dumps(artifact.to_dict(), indent=indent, ensure_ascii=False) + "\n"


def import_artifact(path: Path | str) -> Artifact:
    """
    Load an artifact file.

    Raises:
        FileNotFoundError: If the file does not exist.
        FormatError: If the file cannot be read or parsed as an artifact.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise
    except (OSError, UnicodeDecodeError) as e:
        raise FormatError(f"failed to read file: {e}", str(path)) from e

    artifact = artifact_from_json(text, source=str(path))
    logger.debug(
        f"Loaded artifact {artifact.contract_name} from {path} "
        f"({len(artifact.constructor_inputs)} constructor inputs, {len(artifact.functions)} functions)"
    )
    return artifact


def _atomic_write_text(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(path.suffix + f".tmp.{os.getpid()}")
    try:
        tmp.write_text(content, encoding="utf-8")
        tmp.replace(path)
    except (OSError, UnicodeEncodeError):
        if tmp.exists():
            try:
                tmp.unlink()
            except OSError:
                pass  # Best-effort cleanup
        raise


def export_artifact(artifact: Artifact, path: Path | str) -> None:
    """
    Write an artifact as indented JSON, replacing any existing file.

    A failed write never leaves a truncated artifact behind.
    """
    path = Path(path)
    try:
        _atomic_write_text(path, artifact_to_json(artifact))
    except (OSError, UnicodeEncodeError) as e:
        logger.error(f"Writing artifact {artifact.contract_name} to {path} failed: {e}")
        raise
    logger.debug(f"Wrote artifact {artifact.contract_name} to {path}")
