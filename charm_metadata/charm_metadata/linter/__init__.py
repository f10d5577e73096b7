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

"""Linter package for charm metadata files."""

import logging
from pathlib import Path
from typing import List

from ..exceptions import CharmMetadataError
from ..parsers.yaml_parser import yaml_parser
from ..utils.generic_tree import as_string_keyed, lookup
from .actions_linter import ActionsLinter
from .report import LintResult
from .resources_linter import ResourcesLinter

__all__ = ['lint_files', 'LintResult', 'METADATA_FILE_NAMES']

logger = logging.getLogger(__name__)

ACTIONS_FILE = 'actions.yaml'
METADATA_FILE = 'metadata.yaml'
CHARMCRAFT_FILE = 'charmcraft.yaml'
METADATA_FILE_NAMES = (ACTIONS_FILE, METADATA_FILE, CHARMCRAFT_FILE)


def _lint_file(file_path: Path, actions_linter: ActionsLinter, resources_linter: ResourcesLinter) -> LintResult:
    try:
        document, source_map = yaml_parser.load_config_with_source(file_path)
    except CharmMetadataError as e:
        result = LintResult(file_path)
        result.add_error(f"Failed to load YAML file: {e}")
        return result

    result = LintResult(file_path, source_map)

    if file_path.name == ACTIONS_FILE:
        actions_linter.lint(document, result)
    elif file_path.name == METADATA_FILE:
        resources_linter.lint(document, result)
    elif file_path.name == CHARMCRAFT_FILE:
        resources_linter.lint(document, result)
        top_level = as_string_keyed(document) if isinstance(document, dict) else None
        if top_level is not None:
            actions, found = lookup(['actions'], top_level)
            if found:
                actions_linter.lint(actions, result, yaml_path='/actions')
    else:
        result.add_error(
            f"Unrecognized metadata file name. Expected one of: {', '.join(METADATA_FILE_NAMES)}"
        )
    return result


def lint_files(file_paths: List[Path]) -> List[LintResult]:
    """Lint a list of charm metadata files.

    Args:
        file_paths: List of file paths to lint

    Returns:
        List of LintResult objects, one per file
    """
    actions_linter = ActionsLinter()
    resources_linter = ResourcesLinter()

    results = []
    for file_path in file_paths:
        logger.debug(f"Linting {file_path}")
        results.append(_lint_file(Path(file_path), actions_linter, resources_linter))
    return results
