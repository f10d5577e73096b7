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

from collections.abc import Mapping
from typing import Any, Dict, IO
import logging

from ..exceptions import NotValidError
from ..models.resource import ResourceMeta, parse_meta
from ..utils.generic_tree import as_string_keyed, join_path, lookup
from .yaml_parser import yaml_parser

logger = logging.getLogger(__name__)

RESOURCES_PATH = "/resources"


def resources_section(metadata: Any) -> Mapping:
    """Return the ``resources`` mapping of decoded charm metadata.

    A missing or empty section gives an empty mapping.

    Raises:
        NotValidError: If the metadata or its resources section has the wrong shape.
    """
    if metadata is None:
        return {}
    if not isinstance(metadata, Mapping):
        raise NotValidError(f"charm metadata must be a mapping, got {type(metadata).__name__}")

    top_level = as_string_keyed(metadata)
    if top_level is None:
        raise NotValidError("charm metadata keyed with non-string value")

    section, found = lookup(["resources"], top_level)
    if not found or section is None:
        return {}
    if not isinstance(section, Mapping):
        raise NotValidError(
            f"resources must be a mapping, got {type(section).__name__}", yaml_path=RESOURCES_PATH
        )
    return section


def parse_resource_entry(name: Any, data: Any) -> ResourceMeta:
    """Parse one entry of the resources section.

    Raises:
        NotValidError: If the name is not a string or the body is not a mapping.
    """
    if not isinstance(name, str):
        raise NotValidError(f"resource name must be a string, got {name!r}", yaml_path=RESOURCES_PATH)
    try:
        return parse_meta(name, data)
    except NotValidError as exc:
        exc.yaml_path = join_path(RESOURCES_PATH, name)
        raise


def parse_resources(metadata: Any) -> Dict[str, ResourceMeta]:
    """Parse the ``resources`` section of decoded charm metadata.

    Descriptors are only parsed here; each one is validated on its own by the
    caller. Callers that must report every bad entry iterate
    ``resources_section`` and call ``parse_resource_entry`` per entry.

    Raises:
        NotValidError: On the first entry, or section, with the wrong shape.
    """
    resources: Dict[str, ResourceMeta] = {}
    for name, data in resources_section(metadata).items():
        resources[name] = parse_resource_entry(name, data)

    logger.debug(f"Parsed {len(resources)} resource(s)")
    return resources


def read_resources_yaml(stream: IO[str]) -> Dict[str, ResourceMeta]:
    """Parse the resources declared in a charm's metadata.yaml stream."""
    source = getattr(stream, "name", "<stream>")
    return parse_resources(yaml_parser.load_config_from_string(stream.read(), source=str(source)))
