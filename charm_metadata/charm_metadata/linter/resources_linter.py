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

"""Resource descriptor linter for metadata.yaml and charmcraft.yaml."""

from typing import Any

from ..exceptions import CharmMetadataError, NotValidError
from ..parsers.metadata_parser import RESOURCES_PATH, parse_resource_entry, resources_section
from ..utils.generic_tree import join_path
from .report import LintResult


class ResourcesLinter:
    """Linter for the resources section of charm metadata."""

    def lint(self, metadata: Any, result: LintResult):
        """Parse and validate each declared resource independently."""
        try:
            section = resources_section(metadata)
        except CharmMetadataError as exc:
            result.add_exception(exc)
            return

        for name, data in section.items():
            try:
                meta = parse_resource_entry(name, data)
                meta.validate()
            except NotValidError as exc:
                if exc.yaml_path is None:
                    exc.yaml_path = join_path(RESOURCES_PATH, name)
                result.add_exception(exc)
