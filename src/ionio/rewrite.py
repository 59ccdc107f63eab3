from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace

from ionio.artifact import ArtifactFunction


def replace_asm_token(function: ArtifactFunction, target: str, replacement: str) -> ArtifactFunction:
    """
    Replace every asm token equal to `target` with `replacement`.

    Matching is exact string equality: "$foo" is untouched by a rewrite of
    "$foobar". functionInputs and require are never inspected. Returns the
    same function when no token matches.
    """
    if target not in function.asm:
        return function
    asm = tuple(replacement if token == target else token for token in function.asm)
    return replace(function, asm=asm)


def replace_token_in_functions(
    functions: Iterable[ArtifactFunction], target: str, replacement: str
) -> tuple[ArtifactFunction, ...]:
    return tuple(replace_asm_token(f, target, replacement) for f in functions)


def count_token(functions: Iterable[ArtifactFunction], token: str) -> int:
    return sum(f.asm.count(token) for f in functions)
