"""
Constructor parameter binding.

A binding either renames a constructor input (keeping it symbolic for a later
pass) or encodes a concrete value into every instruction that references it.
`transform_artifact` folds a list of bindings over the constructor inputs in
declaration order.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, replace
from typing import Any, Optional, Union

from ionio.argument import Argument, encode_argument
from ionio.artifact import Artifact, Parameter
from ionio.constants import placeholder
from ionio.errors import ConstructorInputNotFoundError, FormatError
from ionio.rewrite import count_token, replace_token_in_functions

logger = logging.getLogger(__name__)

Encoder = Callable[[Any, str], bytes]


@dataclass(frozen=True)
class Rename:
    """Keep the parameter symbolic under a new name."""

    new_name: str


@dataclass(frozen=True)
class Value:
    """Bake `payload`, encoded as the parameter's type, into the asm."""

    payload: Argument


Binding = Union[Rename, Value]


def template_string(new_name: str) -> Rename:
    return Rename(new_name)


def _find_constructor_input(artifact: Artifact, name: str) -> Parameter:
    param = artifact.constructor_input(name)
    if param is None:
        raise ConstructorInputNotFoundError(name, artifact.constructor_input_names())
    return param


def rename_constructor_input(artifact: Artifact, name: str, new_name: str) -> Artifact:
    """
    Rename constructor input `name` to `new_name` and rewrite its placeholder.

    Raises:
        ConstructorInputNotFoundError: If no constructor input is called `name`.
    """
    param = _find_constructor_input(artifact, name)
    target = placeholder(param.name)
    logger.debug(
        f"Renaming constructor input {name!r} -> {new_name!r} "
        f"({count_token(artifact.functions, target)} asm references)"
    )
    return replace(
        artifact,
        constructor_inputs=tuple(
            replace(p, name=new_name) if p.name == param.name else p for p in artifact.constructor_inputs
        ),
        functions=replace_token_in_functions(artifact.functions, target, placeholder(new_name)),
    )


def encode_constructor_arg(
    artifact: Artifact,
    input_name: str,
    arg: Argument,
    *,
    encoder: Encoder = encode_argument,
) -> Artifact:
    """
    Encode `arg` as constructor input `input_name` and remove that input.

    Raises:
        ConstructorInputNotFoundError: If no constructor input is called `input_name`.
        EncodingError: Propagated unchanged from `encoder`.
    """
    param = _find_constructor_input(artifact, input_name)
    encoded = encoder(arg, param.type).hex()
    target = placeholder(param.name)
    logger.debug(
        f"Binding constructor input {input_name!r} ({param.type}) to {encoded} "
        f"({count_token(artifact.functions, target)} asm references)"
    )
    return replace(
        artifact,
        constructor_inputs=tuple(p for p in artifact.constructor_inputs if p.name != param.name),
        functions=replace_token_in_functions(artifact.functions, target, encoded),
    )


def transform_artifact(
    artifact: Artifact,
    bindings: Sequence[Optional[Binding]],
    *,
    encoder: Encoder = encode_argument,
) -> Artifact:
    """
    Apply `bindings` positionally to the constructor inputs of `artifact`.

    bindings[i] targets the i-th constructor input as declared in `artifact`,
    resolved by that input's original name; a None entry or a missing trailing
    entry leaves the input alone. Each step sees the result of the previous
    one, so any failure aborts the whole transformation.
    """
    original_inputs = artifact.constructor_inputs
    if len(bindings) > len(original_inputs):
        logger.warning(
            f"{artifact.contract_name}: ignoring {len(bindings) - len(original_inputs)} binding(s) "
            f"beyond the {len(original_inputs)} constructor input(s)"
        )

    result = artifact
    for param, binding in zip(original_inputs, bindings):
        if binding is None:
            continue
        if isinstance(binding, Rename):
            result = rename_constructor_input(result, param.name, binding.new_name)
        elif isinstance(binding, Value):
            result = encode_constructor_arg(result, param.name, binding.payload, encoder=encoder)
        else:
            raise TypeError(f"expected Rename, Value or None binding, got {type(binding).__name__}")
    return result


def bindings_from_json(items: Sequence[Any]) -> list[Optional[Binding]]:
    """
    Convert a JSON bindings list into Binding values.

    - null -> no binding
    - any object with a "newName" key -> Rename (other keys are ignored)
    - anything else -> Value
    """
    out: list[Optional[Binding]] = []
    for i, item in enumerate(items):
        if item is None:
            out.append(None)
        elif isinstance(item, dict) and "newName" in item:
            if not isinstance(item["newName"], str):
                raise FormatError(f"bindings[{i}].newName: expected str, got {type(item['newName']).__name__}")
            out.append(Rename(item["newName"]))
        else:
            out.append(Value(item))
    return out
