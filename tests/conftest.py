"""
Shared pytest fixtures for artifact tests.
"""

from __future__ import annotations

import shutil
from pathlib import Path

import pytest

from ionio.artifact import Artifact, ArtifactFunction, Parameter, import_artifact

FIXTURES_DIR = Path(__file__).parent / "fixtures"

OWNER_KEY = "ab" * 32


def make_artifact(inputs: list[tuple[str, str]], *asms: list[str]) -> Artifact:
    """Build a small artifact with one function per asm list."""
    return Artifact(
        contract_name="Test",
        constructor_inputs=tuple(Parameter(name=n, type=t) for n, t in inputs),
        functions=tuple(ArtifactFunction(name=f"fn{i}", asm=tuple(asm)) for i, asm in enumerate(asms)),
    )


@pytest.fixture
def calculator_path(tmp_path: Path) -> Path:
    """A writable copy of the calculator fixture."""
    dst = tmp_path / "calculator.json"
    shutil.copy(FIXTURES_DIR / "calculator.json", dst)
    return dst


@pytest.fixture
def calculator(calculator_path: Path) -> Artifact:
    return import_artifact(calculator_path)
