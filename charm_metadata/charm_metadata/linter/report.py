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

"""Error reporting for the linter."""

from pathlib import Path
from typing import Any, Dict, List, Optional

from ..exceptions import CharmMetadataError
from ..file_io.source_location import SourceLocation, format_source, lookup_source


class LintResult:
    """Container for linting results for a single file."""

    def __init__(self, file_path: Path, source_map: Optional[Dict[str, Dict[str, int]]] = None):
        """Initialize lint result.

        Args:
            file_path: Path to the file being linted
            source_map: YAML path to line/column map used to locate issues
        """
        self.file_path = file_path
        self.source_map = source_map
        self.errors: List[Dict[str, Any]] = []
        self.warnings: List[Dict[str, Any]] = []

    @property
    def ok(self) -> bool:
        return not self.errors

    def _entry(self, message: str, yaml_path: Optional[str]) -> Dict[str, Any]:
        loc = lookup_source(self.source_map, yaml_path)
        entry: Dict[str, Any] = {'message': message}
        if loc.line is not None:
            entry['line'] = loc.line
        if loc.column is not None:
            entry['column'] = loc.column
        if yaml_path is not None:
            entry['yaml_path'] = yaml_path
        return entry

    def add_error(self, message: str, yaml_path: Optional[str] = None):
        """Add an error located at ``yaml_path`` (when given)."""
        self.errors.append(self._entry(message, yaml_path))

    def add_warning(self, message: str, yaml_path: Optional[str] = None):
        """Add a warning located at ``yaml_path`` (when given)."""
        self.warnings.append(self._entry(message, yaml_path))

    def add_exception(self, exc: CharmMetadataError, prefix: str = ""):
        """Record a metadata error, appending its source location to the message."""
        entry = self._entry(f"{prefix}{exc}", exc.yaml_path)
        src = SourceLocation(file_path=self.file_path, line=entry.get('line'), column=entry.get('column'))
        entry['message'] += format_source(src)
        self.errors.append(entry)
