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

"""Builder for action schemas declared in a charm's actions.yaml."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any, Dict, IO, Optional

from ..exceptions import (
    ActionsError,
    InvalidActionNameError,
    InvalidFieldTypeError,
    InvalidParamsShapeError,
    InvalidSchemaDocumentError,
    ReservedKeyError,
)
from ..models.actions import DEFAULT_DESCRIPTION, ActionSpec, Actions
from ..schema.json_schema import compile_schema, resolve_draft
from ..utils.generic_tree import RESERVED_SCHEMA_KEYS, canonicalize, coerce_string_keys, join_path
from .yaml_parser import yaml_parser

logger = logging.getLogger(__name__)


ACTION_NAME_RULE = re.compile(r"[a-z](?:[a-z-]*[a-z])?")


def is_valid_action_name(name: Any) -> bool:
    return isinstance(name, str) and ACTION_NAME_RULE.fullmatch(name) is not None


def _schema_to_document_path(action_path: str, schema_path: Optional[str]) -> str:
    # Built schemas keep user params under "properties"; point back at "params".
    if not schema_path:
        return action_path
    if schema_path == "/properties" or schema_path.startswith("/properties/"):
        return action_path + "/params" + schema_path[len("/properties"):]
    return action_path + schema_path


def _require_string(name: str, key: str, value: Any, yaml_path: str) -> str:
    if not isinstance(value, str):
        raise InvalidFieldTypeError(
            f"action {name!r}: value for schema key {key!r} must be a string, got {type(value).__name__}",
            yaml_path=yaml_path,
        )
    return value


def build_action_spec(name: str, body: Any, *, draft: Optional[str] = None, yaml_path: str = "") -> ActionSpec:
    """Build and self-check the schema for a single action.

    Args:
        name: Action name
        body: Decoded action specification (mapping or None)
        draft: JSON Schema draft used for the self-check
        yaml_path: Location of the action in its source document

    Raises:
        ActionsError: If the action cannot be turned into a valid schema
        CanonicalizationError: If nested values use reserved or non-string keys
    """
    action_path = yaml_path or join_path("", name)

    if not is_valid_action_name(name):
        raise InvalidActionNameError(f"bad action name {name!r}", yaml_path=action_path)

    if body is None:
        body = {}
    if not isinstance(body, Mapping):
        raise InvalidFieldTypeError(
            f"action {name!r} must be a mapping, got {type(body).__name__}",
            yaml_path=action_path,
        )
    body = coerce_string_keys(body, yaml_path=action_path)

    description = DEFAULT_DESCRIPTION
    schema: Dict[str, Any] = {
        "description": description,
        "type": "object",
        "title": name,
        "properties": {},
    }

    for key, value in body.items():
        key_path = join_path(action_path, key)
        if key == "description":
            description = _require_string(name, key, value, key_path)
            schema[key] = description
        elif key == "title":
            schema[key] = _require_string(name, key, value, key_path)
        elif key == "required":
            if not isinstance(value, list):
                raise InvalidFieldTypeError(
                    f"action {name!r}: value for schema key {key!r} must be a YAML list",
                    yaml_path=key_path,
                )
            schema[key] = list(value)
        elif key == "params":
            params = canonicalize(value, yaml_path=key_path)
            if not isinstance(params, dict):
                raise InvalidParamsShapeError(
                    f"action {name!r}: params failed to parse as a map",
                    yaml_path=key_path,
                )
            schema["properties"] = params
        elif key in RESERVED_SCHEMA_KEYS:
            raise ReservedKeyError(
                f"action {name!r}: schema key {key!r} is not supported in charm metadata",
                yaml_path=key_path,
            )
        else:
            # Extension keys may hold nested maps as well.
            schema[key] = canonicalize(value, yaml_path=key_path)

    draft = resolve_draft(draft)
    try:
        compile_schema(schema, draft=draft)
    except InvalidSchemaDocumentError as exc:
        raise InvalidSchemaDocumentError(
            f"invalid params schema for action {name!r}: {exc}",
            action_name=name,
            yaml_path=_schema_to_document_path(action_path, exc.yaml_path),
        ) from exc

    logger.debug(f"Built schema for action '{name}'")
    return ActionSpec(description=description, params=schema, draft=draft)


def build_actions(document: Any, *, draft: Optional[str] = None, yaml_path: str = "") -> Actions:
    """Build the actions collection from a decoded actions document.

    The document maps action names to their specifications. Either every action
    builds, or the first failure (in document order) is raised and nothing is
    returned.

    Args:
        document: Decoded actions.yaml content; None means no actions
        draft: JSON Schema draft used for schema self-checks
        yaml_path: Location of the document inside a larger file (e.g. "/actions")

    Returns:
        Actions collection

    Raises:
        ActionsError: For invalid names, field types, params or schemas
        CanonicalizationError: For reserved or non-string keys
    """
    if document is None:
        return Actions()
    if not isinstance(document, Mapping):
        raise ActionsError(
            f"actions document must be a mapping of action names, got {type(document).__name__}",
            yaml_path=yaml_path,
        )

    specs: Dict[str, ActionSpec] = {}
    for name, body in document.items():
        if not isinstance(name, str):
            raise InvalidActionNameError(f"bad action name {name!r}", yaml_path=yaml_path or "/")
        specs[name] = build_action_spec(name, body, draft=draft, yaml_path=join_path(yaml_path, name))

    logger.debug(f"Built {len(specs)} action schema(s)")
    return Actions(specs)


def read_actions_yaml(stream: IO[str], *, draft: Optional[str] = None) -> Actions:
    """Build an actions collection from a charm's actions.yaml stream."""
    source = getattr(stream, "name", "<stream>")
    document = yaml_parser.load_config_from_string(stream.read(), source=str(source))
    return build_actions(document, draft=draft)
