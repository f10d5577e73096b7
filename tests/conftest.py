"""Pytest configuration for tests.

Tests import from the installed charm_metadata package.
"""

import dataclasses
import logging
import textwrap

import pytest

from charm_metadata.config import metadata_config


@pytest.fixture(autouse=True)
def restore_metadata_config():
    """Undo config and logging changes made by CLI runs."""
    saved = dataclasses.replace(metadata_config)
    yield
    for f in dataclasses.fields(metadata_config):
        setattr(metadata_config, f.name, getattr(saved, f.name))
    package_logger = logging.getLogger("charm_metadata")
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture
def write_yaml(tmp_path):
    """Write dedented YAML text to ``tmp_path / relative`` and return the path."""

    def _write(relative, content):
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(content).lstrip("\n"), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def snapshot_document():
    return {
        "snapshot": {
            "description": "take snapshot",
            "params": {"outfile": {"type": "string"}},
        }
    }
