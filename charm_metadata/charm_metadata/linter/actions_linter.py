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

"""Action schema linter for actions.yaml (and the actions section of charmcraft.yaml)."""

from typing import Any

from ..exceptions import CharmMetadataError
from ..models.actions import DEFAULT_DESCRIPTION
from ..parsers.actions_parser import build_actions
from ..utils.generic_tree import join_path
from .report import LintResult


class ActionsLinter:
    """Linter that builds every action schema of a document."""

    def lint(self, document: Any, result: LintResult, yaml_path: str = ""):
        """Lint a decoded actions document.

        Args:
            document: Decoded actions mapping
            result: LintResult to add errors/warnings to
            yaml_path: Location of the actions mapping in the file
        """
        try:
            actions = build_actions(document, yaml_path=yaml_path)
        except CharmMetadataError as exc:
            result.add_exception(exc)
            return

        for name in actions:
            if actions[name].description == DEFAULT_DESCRIPTION:
                result.add_warning(
                    f"Action '{name}' has no description",
                    yaml_path=join_path(yaml_path, name),
                )
