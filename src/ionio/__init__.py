"""Specialize compiled contract artifacts by binding constructor inputs."""

from ionio.argument import Argument, PrimitiveType, encode_argument
from ionio.artifact import (
    Artifact,
    ArtifactFunction,
    Parameter,
    Requirement,
    artifact_from_json,
    artifact_to_json,
    export_artifact,
    import_artifact,
)
from ionio.binder import (
    Binding,
    Rename,
    Value,
    bindings_from_json,
    encode_constructor_arg,
    rename_constructor_input,
    template_string,
    transform_artifact,
)
from ionio.errors import ArtifactError, ConstructorInputNotFoundError, EncodingError, FormatError
from ionio.rewrite import replace_asm_token

__all__ = [
    "Argument",
    "Artifact",
    "ArtifactError",
    "ArtifactFunction",
    "Binding",
    "ConstructorInputNotFoundError",
    "EncodingError",
    "FormatError",
    "Parameter",
    "PrimitiveType",
    "Rename",
    "Requirement",
    "Value",
    "artifact_from_json",
    "artifact_to_json",
    "bindings_from_json",
    "encode_argument",
    "encode_constructor_arg",
    "export_artifact",
    "import_artifact",
    "rename_constructor_input",
    "replace_asm_token",
    "template_string",
    "transform_artifact",
]
