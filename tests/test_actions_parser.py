"""Tests for building action schemas."""

import copy
import io

import pytest

from charm_metadata.exceptions import (
    ActionsError,
    InvalidActionNameError,
    InvalidFieldTypeError,
    InvalidParamsShapeError,
    InvalidSchemaDocumentError,
    NonStringKeyError,
    ReservedKeyError,
)
from charm_metadata.models.actions import DEFAULT_DESCRIPTION, ActionSpec, Actions
from charm_metadata.parsers.actions_parser import build_actions, read_actions_yaml


def test_build_snapshot_action(snapshot_document):
    actions = build_actions(snapshot_document, draft="draft4")

    spec = actions["snapshot"]
    assert spec == ActionSpec(
        description="take snapshot",
        params={
            "description": "take snapshot",
            "type": "object",
            "title": "snapshot",
            "properties": {"outfile": {"type": "string"}},
        },
        draft="draft4",
    )


def test_action_spec_records_draft(snapshot_document):
    assert build_actions(snapshot_document, draft=" Draft7 ")["snapshot"].draft == "draft7"


def test_action_spec_is_hashable(snapshot_document):
    first = build_actions(snapshot_document)["snapshot"]
    second = build_actions(snapshot_document)["snapshot"]

    assert first == second
    assert hash(first) == hash(second)
    assert len({first, second}) == 1


def test_default_description_and_empty_properties():
    actions = build_actions({"snapshot": {}, "restart": None})

    for name in ("snapshot", "restart"):
        assert actions[name].description == DEFAULT_DESCRIPTION
        assert actions[name].params == {
            "description": DEFAULT_DESCRIPTION,
            "type": "object",
            "title": name,
            "properties": {},
        }


def test_title_required_and_extension_keys():
    document = {
        "snapshot": {
            "title": "Take a snapshot",
            "required": ["outfile"],
            "additionalProperties": False,
            "params": {
                "outfile": {"type": "string", "description": "where to write"},
                "mode": {"type": "string", "enum": ["full", "incremental"]},
            },
        }
    }

    params = build_actions(document)["snapshot"].params

    assert params["title"] == "Take a snapshot"
    assert params["required"] == ["outfile"]
    assert params["additionalProperties"] is False
    assert params["properties"]["mode"] == {"type": "string", "enum": ["full", "incremental"]}
    assert params["description"] == DEFAULT_DESCRIPTION


def test_build_does_not_mutate_document():
    document = {
        "snapshot": {
            "required": ["outfile"],
            "params": {"outfile": {"type": "string"}},
        }
    }
    before = copy.deepcopy(document)

    params = build_actions(document)["snapshot"].params
    params["required"].append("other")
    params["properties"]["outfile"]["type"] = "integer"

    assert document == before


@pytest.mark.parametrize("name", ["snapshot", "a", "ab", "back-up", "x-y-z", "do--it"])
def test_valid_action_names(name):
    assert name in build_actions({name: {}})


@pytest.mark.parametrize(
    "name", ["Snapshot", "-snap", "snap-", "", "snap1", "snap_shot", "-", "snap\n", "snapshot\n", "\nsnap"]
)
def test_invalid_action_names(name):
    with pytest.raises(InvalidActionNameError) as exc_info:
        build_actions({name: {}})

    assert "bad action name" in str(exc_info.value)


def test_non_string_action_name():
    with pytest.raises(InvalidActionNameError):
        build_actions({1: {}})


@pytest.mark.parametrize(
    "body, key",
    [
        ({"description": 5}, "description"),
        ({"description": ["take", "snapshot"]}, "description"),
        ({"title": {"text": "x"}}, "title"),
        ({"required": "outfile"}, "required"),
        ({"required": {"outfile": True}}, "required"),
    ],
)
def test_fixed_field_types(body, key):
    with pytest.raises(InvalidFieldTypeError) as exc_info:
        build_actions({"snapshot": body})

    message = str(exc_info.value)
    assert key in message
    assert "snapshot" in message
    assert exc_info.value.yaml_path == f"/snapshot/{key}"


def test_action_body_must_be_mapping():
    with pytest.raises(InvalidFieldTypeError):
        build_actions({"snapshot": ["outfile"]})


@pytest.mark.parametrize("params", [["outfile"], "outfile", 5, None])
def test_params_must_be_mapping(params):
    with pytest.raises(InvalidParamsShapeError, match="params failed to parse as a map"):
        build_actions({"snapshot": {"params": params}})


def test_params_reserved_key():
    document = {"snapshot": {"params": {"outfile": {"$ref": "#/definitions/file"}}}}

    with pytest.raises(ReservedKeyError) as exc_info:
        build_actions(document)

    assert exc_info.value.yaml_path == "/snapshot/params/outfile/$ref"
    assert "$ref" in str(exc_info.value)


def test_extension_reserved_key():
    with pytest.raises(ReservedKeyError) as exc_info:
        build_actions({"snapshot": {"$schema": "http://json-schema.org/draft-04/schema#"}})

    assert exc_info.value.yaml_path == "/snapshot/$schema"


def test_nested_extension_reserved_key():
    document = {"snapshot": {"definitions": {"file": {"items": [{"$ref": "#"}]}}}}

    with pytest.raises(ReservedKeyError):
        build_actions(document)


def test_params_non_string_key():
    with pytest.raises(NonStringKeyError):
        build_actions({"snapshot": {"params": {1: {"type": "string"}}}})


def test_action_body_non_string_key():
    with pytest.raises(NonStringKeyError):
        build_actions({"snapshot": {None: "x"}})


def test_invalid_schema_document():
    document = {"snapshot": {"params": {"outfile": {"type": "nonsense"}}}}

    with pytest.raises(InvalidSchemaDocumentError) as exc_info:
        build_actions(document)

    assert exc_info.value.action_name == "snapshot"
    assert "invalid params schema for action 'snapshot'" in str(exc_info.value)
    assert exc_info.value.yaml_path.startswith("/snapshot/params/outfile")


def test_invalid_extension_schema_value():
    with pytest.raises(InvalidSchemaDocumentError) as exc_info:
        build_actions({"snapshot": {"minProperties": "three"}})

    assert exc_info.value.yaml_path == "/snapshot/minProperties"


def test_build_is_all_or_nothing():
    document = {
        "snapshot": {"description": "take snapshot"},
        "restart": {"params": {"delay": {"type": "bogus"}}},
    }

    with pytest.raises(InvalidSchemaDocumentError):
        build_actions(document)


def test_first_failure_in_document_order_is_reported():
    document = {
        "snapshot": {"description": 1},
        "Bad": {},
    }

    with pytest.raises(InvalidFieldTypeError):
        build_actions(document)


def test_empty_document():
    actions = build_actions(None)

    assert len(actions) == 0
    assert actions.names() == []


@pytest.mark.parametrize("document", [["snapshot"], "snapshot", 3])
def test_document_must_be_mapping(document):
    with pytest.raises(ActionsError):
        build_actions(document)


def test_actions_collection_interface(snapshot_document):
    snapshot_document["restart"] = {"description": "restart the service"}
    actions = build_actions(snapshot_document)

    assert isinstance(actions, Actions)
    assert len(actions) == 2
    assert "snapshot" in actions
    assert "backup" not in actions
    assert list(actions) == ["snapshot", "restart"]
    assert actions.names() == ["snapshot", "restart"]
    assert actions.get("backup") is None
    assert actions.get("restart").description == "restart the service"


def test_actions_collection_is_read_only(snapshot_document):
    actions = build_actions(snapshot_document)

    with pytest.raises(TypeError):
        actions.action_specs["restart"] = ActionSpec(description="x", params={})


def test_param_schema_lookup(snapshot_document):
    actions = build_actions(snapshot_document)

    assert actions.param_schema("snapshot", "outfile") == ({"type": "string"}, True)
    assert actions.param_schema("snapshot", "outfile", "type") == ("string", True)
    assert actions.param_schema("snapshot", "missing", "type") == (None, False)
    assert actions.param_schema("restart", "outfile") == (None, False)


def test_schema_draft_selection(snapshot_document):
    actions = build_actions(snapshot_document, draft="draft7")

    assert actions["snapshot"].params["title"] == "snapshot"
    with pytest.raises(ValueError):
        build_actions(snapshot_document, draft="draft1")


def test_read_actions_yaml():
    stream = io.StringIO(
        "snapshot:\n"
        "  description: Take a snapshot of the database.\n"
        "  params:\n"
        "    outfile:\n"
        "      description: The file to write out to.\n"
        "      type: string\n"
        "  required: [outfile]\n"
        "remote-sync:\n"
        "  description: Sync a file to a remote host.\n"
    )

    actions = read_actions_yaml(stream)

    assert actions.names() == ["snapshot", "remote-sync"]
    assert actions["snapshot"].params["properties"]["outfile"]["type"] == "string"
    assert actions["snapshot"].params["required"] == ["outfile"]
    assert actions["remote-sync"].params["properties"] == {}


def test_read_actions_yaml_boolean_key():
    # YAML 1.1 reads "yes" as a boolean key.
    stream = io.StringIO(
        "snapshot:\n"
        "  params:\n"
        "    yes:\n"
        "      type: string\n"
    )

    with pytest.raises(NonStringKeyError):
        read_actions_yaml(stream)
