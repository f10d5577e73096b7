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

"""Resource descriptors declared in a charm's metadata."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from ..exceptions import NotValidError

logger = logging.getLogger(__name__)


class ResourceType(Enum):
    """Kind of resource a charm declares."""

    UNKNOWN = ""
    FILE = "file"

    @classmethod
    def parse(cls, value: str) -> "ResourceType":
        """Return the resource type named by ``value``.

        Raises:
            ValueError: If ``value`` does not name a supported type.
        """
        for member in _SUPPORTED_TYPES:
            if member.value == value:
                return member
        raise ValueError(f"unsupported resource type {value!r}")

    def validate(self) -> None:
        """Raise ValueError unless this is a supported resource type."""
        if self not in _SUPPORTED_TYPES:
            raise ValueError(f"unknown resource type {self.value!r}")

    def __str__(self) -> str:
        return self.value


_SUPPORTED_TYPES = (ResourceType.FILE,)


@dataclass(frozen=True)
class ResourceMeta:
    """Information about a resource, as stored in a charm's metadata.

    ``path`` is where the resource is stored, relative to a directory reserved
    for that resource under the unit's data directory. For a ``file`` resource
    named ``eggs`` with path ``eggs.tgz`` the unit sees
    ``<unit data dir>/resources/eggs/eggs.tgz``.
    """

    name: str
    type: ResourceType = ResourceType.UNKNOWN
    path: str = ""
    comment: str = ""

    def validate(self) -> None:
        """Check the resource metadata to ensure the data is valid.

        Raises:
            NotValidError: On the first failing check.
        """
        if not self.name:
            raise NotValidError("resource missing name")

        if self.type is ResourceType.UNKNOWN:
            raise NotValidError(f"resource {self.name!r} missing type")
        try:
            self.type.validate()
        except ValueError as exc:
            raise NotValidError(f"resource {self.name!r} has invalid type {self.type}: {exc}") from exc

        if not self.path:
            raise NotValidError(f"resource {self.name!r} missing filename")
        if self.type is ResourceType.FILE and "/" in self.path:
            raise NotValidError(f"resource {self.name!r}: filename cannot contain \"/\" (got {self.path!r})")


def _string_field(name: str, data: Mapping, key: str) -> Optional[str]:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        logger.warning(f"Ignoring non-string '{key}' of resource '{name}': {value!r}")
        return None
    return value


def parse_meta(name: str, data: Any) -> ResourceMeta:
    """Parse the metadata of a single resource.

    Absent fields, and fields of the wrong type, keep their zero value so that
    ``validate()`` reports them.

    Args:
        name: Resource name (the key in the ``resources`` section)
        data: Decoded resource body, or None

    Raises:
        NotValidError: If ``data`` is neither None nor a mapping.
    """
    if data is None:
        return ResourceMeta(name=name)

    if not isinstance(data, Mapping):
        raise NotValidError(f"resource {name!r} must be a mapping, got {type(data).__name__}")

    resource_type = ResourceType.UNKNOWN
    raw_type = _string_field(name, data, "type")
    if raw_type is not None:
        try:
            resource_type = ResourceType.parse(raw_type)
        except ValueError as exc:
            logger.debug(f"Resource '{name}': {exc}")

    return ResourceMeta(
        name=name,
        type=resource_type,
        path=_string_field(name, data, "filename") or "",
        comment=_string_field(name, data, "comment") or "",
    )
