"""Helpers for loosely-typed trees produced by YAML/JSON decoders.

Decoded documents are plain ``dict``/``list``/scalar trees whose mapping keys
may be of any hashable type (YAML happily produces ``1:`` or ``yes:`` keys).
Schema documents need string keys everywhere, so mappings go through an
explicit, fallible key coercion before they are used as schema content.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, Optional, Sequence, Tuple

from ..exceptions import NonStringKeyError, ReservedKeyError


RESERVED_SCHEMA_KEYS = frozenset({"$ref", "$schema"})

JsonPointer = str


def _jp_escape(token: str) -> str:
    return token.replace("~", "~0").replace("/", "~1")


def join_path(base: Optional[JsonPointer], token: Any) -> JsonPointer:
    """Append ``token`` to a JSON-pointer-like path."""
    if not base:
        return f"/{_jp_escape(str(token))}"
    return f"{base}/{_jp_escape(str(token))}"


def as_string_keyed(mapping: Mapping) -> Optional[Dict[str, Any]]:
    """Return a string-keyed copy of ``mapping``, or None if any key is not a string."""
    result: Dict[str, Any] = {}
    for key, value in mapping.items():
        if not isinstance(key, str):
            return None
        result[key] = value
    return result


def coerce_string_keys(mapping: Mapping, *, yaml_path: JsonPointer = "") -> Dict[str, Any]:
    """Return a string-keyed copy of ``mapping``.

    Raises:
        NonStringKeyError: If any key is not a string.
    """
    result: Dict[str, Any] = {}
    for key, value in mapping.items():
        if not isinstance(key, str):
            raise NonStringKeyError(
                f"map at {yaml_path or '/'} keyed with non-string value {key!r}",
                yaml_path=yaml_path,
            )
        result[key] = value
    return result


def canonicalize(node: Any, *, yaml_path: JsonPointer = "") -> Any:
    """Rebuild ``node`` so that every mapping has string keys and no reserved keys.

    Mappings and sequences are copied; scalars are returned as-is. The input is
    never modified.

    Args:
        node: Decoded data tree
        yaml_path: Location of ``node`` in its source document, used in errors

    Returns:
        The canonical tree

    Raises:
        NonStringKeyError: If a mapping at any depth has a non-string key
        ReservedKeyError: If ``$ref`` or ``$schema`` is used as a key at any depth
    """
    if isinstance(node, Mapping):
        # All keys of a mapping are coerced before any of them is inspected.
        typed = coerce_string_keys(node, yaml_path=yaml_path)
        result: Dict[str, Any] = {}
        for key, value in typed.items():
            child_path = join_path(yaml_path, key)
            if key in RESERVED_SCHEMA_KEYS:
                raise ReservedKeyError(
                    f"schema key {key!r} at {child_path} is not supported in charm metadata",
                    yaml_path=child_path,
                )
            result[key] = canonicalize(value, yaml_path=child_path)
        return result

    if isinstance(node, (list, tuple)):
        return [canonicalize(item, yaml_path=join_path(yaml_path, idx)) for idx, item in enumerate(node)]

    return node


def lookup(path: Sequence[str], tree: Mapping[str, Any]) -> Tuple[Any, bool]:
    """Look up a value in nested mappings by following ``path``.

    ``lookup(["a", "b"], {"a": {"b": {"c": "d"}}})`` returns ``({"c": "d"}, True)``.
    A missing key, a non-mapping intermediate value, or an intermediate mapping
    with a non-string key all give ``(None, False)``.

    Raises:
        ValueError: If ``path`` is empty.
    """
    if not path:
        raise ValueError("lookup path must contain at least one key")

    key, rest = path[0], path[1:]
    if not rest:
        if key in tree:
            return tree[key], True
        return None, False

    if key not in tree:
        return None, False

    value = tree[key]
    if not isinstance(value, Mapping):
        return None, False

    nested = as_string_keyed(value)
    if nested is None:
        return None, False
    return lookup(rest, nested)
