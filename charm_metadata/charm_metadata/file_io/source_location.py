from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional


@dataclass(frozen=True)
class SourceLocation:
    file_path: Optional[Path] = None
    yaml_path: Optional[str] = None
    line: Optional[int] = None  # 1-based
    column: Optional[int] = None  # 1-based


def lookup_source(source_map: Optional[Dict[str, Dict[str, int]]], yaml_path: Optional[str]) -> SourceLocation:
    """Find the closest recorded location for ``yaml_path``.

    Keys that do not exist in the document (e.g. a missing field) fall back to
    their nearest existing parent.
    """
    if not source_map or yaml_path is None:
        return SourceLocation(yaml_path=yaml_path)

    candidate = yaml_path
    while True:
        entry = source_map.get(candidate)
        if entry:
            return SourceLocation(
                yaml_path=yaml_path,
                line=entry.get("line"),
                column=entry.get("column"),
            )
        if not candidate:
            return SourceLocation(yaml_path=yaml_path)
        candidate = candidate.rsplit("/", 1)[0]


def format_source(loc: Optional[SourceLocation]) -> str:
    if not loc:
        return ""

    parts = []
    if loc.file_path is not None:
        if loc.line is not None and loc.column is not None:
            parts.append(f"source={loc.file_path}:{loc.line}:{loc.column}")
        elif loc.line is not None:
            parts.append(f"source={loc.file_path}:{loc.line}")
        else:
            parts.append(f"source={loc.file_path}")

    if loc.yaml_path:
        parts.append(f"yaml_path={loc.yaml_path}")

    if not parts:
        return ""

    return " (" + " ".join(parts) + ")"
