#!/usr/bin/env python3
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

"""CLI entry point for linting charm metadata files."""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from ..config import metadata_config
from . import METADATA_FILE_NAMES, LintResult, lint_files


def find_metadata_files(paths: List[str]) -> List[Path]:
    """Find all charm metadata YAML files in given paths."""
    metadata_files = []

    for path_str in paths:
        path = Path(path_str)

        if not path.exists():
            print(f"Warning: Path does not exist: {path}", file=sys.stderr)
            continue

        if path.is_file():
            if path.name in METADATA_FILE_NAMES:
                metadata_files.append(path)
            else:
                print(f"Warning: File is not a charm metadata file: {path}", file=sys.stderr)
        elif path.is_dir():
            for name in METADATA_FILE_NAMES:
                metadata_files.extend(path.rglob(name))
        else:
            print(f"Warning: Path is neither file nor directory: {path}", file=sys.stderr)

    return sorted(set(metadata_files))


def _print_results(results: List[LintResult], output_format: str) -> None:
    if output_format == 'json':
        output = {
            'files': len(results),
            'errors': sum(len(r.errors) for r in results),
            'warnings': sum(len(r.warnings) for r in results),
            'results': [
                {
                    'file': str(r.file_path),
                    'errors': r.errors,
                    'warnings': r.warnings,
                }
                for r in results
            ]
        }
        print(json.dumps(output, indent=2))
    elif output_format == 'github-actions':
        for result in results:
            for error in result.errors:
                print(f"::error file={result.file_path},line={error.get('line', 1)}::{error['message']}")
            for warning in result.warnings:
                print(f"::warning file={result.file_path},line={warning.get('line', 1)}::{warning['message']}")
    else:
        for result in results:
            if result.errors or result.warnings:
                print(f"\n{result.file_path}:")
                for error in result.errors:
                    line_info = f":{error['line']}" if 'line' in error else ""
                    print(f"  ERROR{line_info}: {error['message']}")
                for warning in result.warnings:
                    line_info = f":{warning['line']}" if 'line' in warning else ""
                    print(f"  WARNING{line_info}: {warning['message']}")


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the linter CLI."""
    parser = argparse.ArgumentParser(
        description='Lint charm metadata files (actions.yaml, metadata.yaml, charmcraft.yaml)',
    )
    parser.add_argument(
        'paths',
        nargs='*',
        default=None,
        help='File paths or directories to lint (default: current directory)',
    )
    parser.add_argument(
        '--format',
        choices=['human', 'json', 'github-actions'],
        default='human',
        help='Output format (default: human)',
    )
    parser.add_argument(
        '--schema-draft',
        default=None,
        help=f'JSON Schema draft for action params (default: {metadata_config.schema_draft})',
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable debug logging',
    )

    args = parser.parse_args(argv)

    if args.verbose:
        metadata_config.log_level = 'DEBUG'
    if args.schema_draft:
        metadata_config.schema_draft = args.schema_draft
    metadata_config.set_logging()

    if not args.paths:
        args.paths = ['.']

    metadata_files = find_metadata_files(args.paths)

    if not metadata_files:
        print("No charm metadata files found.", file=sys.stderr)
        sys.exit(1)

    results = lint_files(metadata_files)
    _print_results(results, args.format)

    total_errors = sum(len(r.errors) for r in results)
    if total_errors > 0:
        sys.exit(1)
    if args.format == 'human':
        print("Lint succeeded with no errors.")
    sys.exit(0)


if __name__ == '__main__':
    main()
