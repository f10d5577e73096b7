# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""JSON Schema compilation and instance checking for action parameters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

import jsonschema
from jsonschema.exceptions import SchemaError

from ..config import metadata_config
from ..exceptions import InvalidSchemaDocumentError
from ..utils.generic_tree import join_path


JsonPointer = str

SCHEMA_VALIDATORS: Dict[str, type] = {
    "draft4": jsonschema.Draft4Validator,
    "draft6": jsonschema.Draft6Validator,
    "draft7": jsonschema.Draft7Validator,
    "draft2019-09": jsonschema.Draft201909Validator,
    "draft2020-12": jsonschema.Draft202012Validator,
}


@dataclass(frozen=True)
class SchemaIssue:
    message: str
    yaml_path: Optional[JsonPointer] = None
    field: str = "(root)"

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of checking one instance against a compiled schema."""

    issues: Tuple[SchemaIssue, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not self.issues


def _path_tokens(path) -> Tuple[str, ...]:
    return tuple(str(token) for token in path)


def _sort_key(path) -> Tuple[Tuple[bool, Any], ...]:
    # Array indexes compare as numbers; an index never shares a position with a key.
    return tuple((isinstance(token, str), token) for token in path)


def _pointer(tokens: Tuple[str, ...]) -> JsonPointer:
    pointer = ""
    for token in tokens:
        pointer = join_path(pointer, token)
    return pointer


def _issue_from_error(error: jsonschema.ValidationError) -> SchemaIssue:
    tokens = _path_tokens(error.absolute_path)
    return SchemaIssue(
        message=error.message,
        yaml_path=_pointer(tokens),
        field=".".join(tokens) if tokens else "(root)",
    )


def resolve_draft(draft: Optional[str] = None) -> str:
    """Return the normalized draft name for ``draft`` (defaults to config).

    Raises:
        ValueError: If the draft is not supported.
    """
    name = (draft or metadata_config.schema_draft).strip().lower()
    if name not in SCHEMA_VALIDATORS:
        raise ValueError(
            f"Unsupported JSON Schema draft '{name}'. Supported: {sorted(SCHEMA_VALIDATORS)}"
        )
    return name


def get_validator_class(draft: Optional[str] = None) -> type:
    """Return the jsonschema validator class for ``draft`` (defaults to config)."""
    return SCHEMA_VALIDATORS[resolve_draft(draft)]


class CompiledSchema:
    """A schema document that passed the meta-schema check."""

    def __init__(self, document: Dict[str, Any], validator_class: type):
        self.document = document
        self._validator = validator_class(document)

    def check(self, instance: Any) -> ValidationResult:
        """Validate ``instance`` and collect every failure, ordered by instance path."""
        errors = sorted(
            self._validator.iter_errors(instance),
            key=lambda e: _sort_key(e.absolute_path),
        )
        return ValidationResult(issues=tuple(_issue_from_error(e) for e in errors))


def compile_schema(document: Any, *, draft: Optional[str] = None) -> CompiledSchema:
    """Check ``document`` against the JSON Schema meta-schema and compile it.

    Args:
        document: Schema document
        draft: JSON Schema draft name; ``metadata_config.schema_draft`` if omitted

    Returns:
        CompiledSchema ready to check instances

    Raises:
        InvalidSchemaDocumentError: If the document is not a valid schema.
        ValueError: If ``draft`` is not supported.
    """
    validator_class = get_validator_class(draft)
    try:
        validator_class.check_schema(document)
    except SchemaError as exc:
        tokens = _path_tokens(exc.absolute_path)
        location = ".".join(tokens) if tokens else "(root)"
        raise InvalidSchemaDocumentError(
            f"{location}: {exc.message}",
            yaml_path=_pointer(tokens),
        ) from exc
    return CompiledSchema(document, validator_class)
