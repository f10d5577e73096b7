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

"""Actions a charm exposes, with their parameter schemas."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple

from ..exceptions import ParameterValidationError
from ..schema.json_schema import compile_schema
from ..utils.generic_tree import lookup

logger = logging.getLogger(__name__)


DEFAULT_DESCRIPTION = "No description"


@dataclass(frozen=True)
class ActionSpec:
    """Definition of the parameters and traits of an action.

    ``params`` is a JSON Schema document with at least ``description``,
    ``type: object``, ``title`` and ``properties``. It is shared, not copied:
    callers must treat it as read-only. ``draft`` names the dialect the schema
    was checked against; None means the configured default.
    """

    description: str
    params: Dict[str, Any] = field(hash=False)
    draft: Optional[str] = None

    def validate_params(self, params: Any, *, draft: Optional[str] = None) -> bool:
        """Check caller-supplied action parameters against this spec.

        Args:
            params: Decoded parameters supplied for one invocation
            draft: Dialect override; defaults to the one the spec was built with

        Returns:
            True if ``params`` conforms to the schema

        Raises:
            ParameterValidationError: If ``params`` does not conform. The message
                lists every failure; ``issues`` holds them individually.
            InvalidSchemaDocumentError: If the schema itself cannot be compiled.
        """
        compiled = compile_schema(self.params, draft=draft or self.draft)
        result = compiled.check(params)
        if result.is_valid:
            return True

        joined = "; ".join(str(issue) for issue in result.issues)
        logger.debug(f"Parameters rejected by action '{self.params.get('title')}': {joined}")
        raise ParameterValidationError(f"JSON validation failed: {joined}", issues=result.issues)


@dataclass(frozen=True)
class Actions:
    """Read-only collection of action specs keyed by action name."""

    action_specs: Mapping[str, ActionSpec] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "action_specs", MappingProxyType(dict(self.action_specs)))

    def __getitem__(self, name: str) -> ActionSpec:
        return self.action_specs[name]

    def __contains__(self, name: object) -> bool:
        return name in self.action_specs

    def __iter__(self) -> Iterator[str]:
        return iter(self.action_specs)

    def __len__(self) -> int:
        return len(self.action_specs)

    def get(self, name: str, default: Optional[ActionSpec] = None) -> Optional[ActionSpec]:
        return self.action_specs.get(name, default)

    def names(self) -> List[str]:
        return list(self.action_specs)

    def param_schema(self, action_name: str, *keys: str) -> Tuple[Any, bool]:
        """Return the schema found under ``properties`` of an action, following ``keys``.

        ``param_schema("snapshot", "outfile", "type")`` returns ``("string", True)``
        for an action declaring ``outfile: {type: string}``. Unknown actions and
        missing keys give ``(None, False)``.
        """
        spec = self.action_specs.get(action_name)
        if spec is None:
            return None, False
        return lookup(["properties", *keys], spec.params)
