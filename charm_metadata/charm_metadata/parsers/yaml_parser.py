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

"""YAML loader for charm metadata files, with optional caching and source maps."""

import yaml
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

from ..config import metadata_config
from ..exceptions import ValidationError
from ..utils.generic_tree import join_path

logger = logging.getLogger(__name__)

SourceMap = Dict[str, Dict[str, int]]


class YamlParser:
    """YAML parser with caching.

    Documents are decoded with ``yaml.safe_load`` and returned untouched: keys
    keep whatever type YAML gives them, so callers canonicalize as needed.
    """

    def __init__(self, cache_enabled: Optional[bool] = None):
        """Initialize YAML parser.

        Args:
            cache_enabled: Whether to enable caching. If None, uses global config.
        """
        self.cache_enabled = cache_enabled if cache_enabled is not None else metadata_config.cache_enabled
        self._cache: Dict[Path, Any] = {}
        self._source_cache: Dict[Path, SourceMap] = {}

    @staticmethod
    def _build_source_map(content: str) -> SourceMap:
        """Map JSON-pointer-like YAML paths to 1-based line/column.

        Uses PyYAML's node tree (yaml.compose) so locations can be tracked
        without changing the data returned by safe_load.
        """
        source_map: SourceMap = {}

        try:
            root = yaml.compose(content, Loader=yaml.SafeLoader)
        except yaml.YAMLError:
            # Parsing errors are reported by safe_load.
            return source_map

        if root is None:
            return source_map

        def _walk(node, path: str) -> None:
            mark = node.start_mark
            # PyYAML uses 0-based line/column
            source_map[path] = {"line": mark.line + 1, "column": mark.column + 1}

            if isinstance(node, yaml.nodes.MappingNode):
                for key_node, value_node in node.value:
                    key = getattr(key_node, "value", None)
                    if key is None:
                        continue
                    _walk(value_node, join_path(path, key))
            elif isinstance(node, yaml.nodes.SequenceNode):
                for idx, item_node in enumerate(node.value):
                    _walk(item_node, join_path(path, idx))

        _walk(root, "")
        return source_map

    @staticmethod
    def _check_file(path: Path) -> None:
        if not path.exists():
            raise ValidationError(f"Metadata file not found: {path}")
        if not path.is_file():
            raise ValidationError(f"Path is not a file: {path}")

    def load_config_with_source(self, file_path: Union[str, Path]) -> Tuple[Any, SourceMap]:
        """Load a YAML file and return (data, source_map).

        source_map keys are JSON-pointer-like YAML paths (e.g. "/snapshot/params").
        Values contain 1-based line/column.
        """
        path = Path(file_path)
        self._check_file(path)

        if self.cache_enabled and path in self._cache and path in self._source_cache:
            logger.debug(f"Loading metadata (with source) from cache: {path}")
            return self._cache[path], self._source_cache[path]

        logger.debug(f"Loading metadata file (with source): {path}")
        try:
            content = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ValidationError(f"Failed to read metadata file {path}: {exc}") from exc

        data, source_map = self.load_config_from_string_with_source(content, source=str(path))

        if self.cache_enabled:
            self._cache[path] = data
            self._source_cache[path] = source_map

        return data, source_map

    def load_config_from_string_with_source(
        self, content: str, source: str = "<string>"
    ) -> Tuple[Any, SourceMap]:
        """Load YAML from string content and return (data, source_map)."""
        data = self.load_config_from_string(content, source=source)
        return data, self._build_source_map(content)

    def load_config(self, file_path: Union[str, Path]) -> Any:
        """Load a YAML file.

        Args:
            file_path: Path to YAML file

        Returns:
            Decoded YAML content; an empty document gives None

        Raises:
            ValidationError: If the file cannot be read or parsed
        """
        path = Path(file_path)
        self._check_file(path)

        if self.cache_enabled and path in self._cache:
            logger.debug(f"Loading metadata from cache: {path}")
            return self._cache[path]

        logger.debug(f"Loading metadata file: {path}")
        try:
            with open(path, 'r', encoding='utf-8') as stream:
                data = yaml.safe_load(stream)
        except yaml.YAMLError as exc:
            raise ValidationError(f"Failed to parse YAML file {path}: {exc}") from exc
        except OSError as exc:
            raise ValidationError(f"Failed to read metadata file {path}: {exc}") from exc

        if self.cache_enabled:
            self._cache[path] = data

        return data

    def load_config_from_string(self, content: str, source: str = "<string>") -> Any:
        """Load YAML from string content.

        Raises:
            ValidationError: If content cannot be parsed
        """
        try:
            return yaml.safe_load(content)
        except yaml.YAMLError as exc:
            raise ValidationError(f"Failed to parse YAML content from {source}: {exc}") from exc

    def clear_cache(self):
        """Clear the metadata cache."""
        self._cache.clear()
        self._source_cache.clear()
        logger.debug("Metadata cache cleared")


# Global parser instance
yaml_parser = YamlParser()
