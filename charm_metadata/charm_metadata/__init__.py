"""charm_metadata: parsing and validation of charm resource and action metadata."""

__version__ = "0.1.0"

from .exceptions import (
    ActionsError,
    CanonicalizationError,
    CharmMetadataError,
    InvalidActionNameError,
    InvalidFieldTypeError,
    InvalidParamsShapeError,
    InvalidSchemaDocumentError,
    NonStringKeyError,
    NotValidError,
    ParameterValidationError,
    ReservedKeyError,
    ValidationError,
)
from .models.actions import DEFAULT_DESCRIPTION, ActionSpec, Actions
from .models.resource import ResourceMeta, ResourceType, parse_meta
from .parsers.actions_parser import build_actions, read_actions_yaml
from .parsers.metadata_parser import parse_resources, read_resources_yaml
from .utils.generic_tree import canonicalize, lookup

__all__ = [
    "__version__",
    "ActionSpec",
    "Actions",
    "ActionsError",
    "CanonicalizationError",
    "CharmMetadataError",
    "DEFAULT_DESCRIPTION",
    "InvalidActionNameError",
    "InvalidFieldTypeError",
    "InvalidParamsShapeError",
    "InvalidSchemaDocumentError",
    "NonStringKeyError",
    "NotValidError",
    "ParameterValidationError",
    "ReservedKeyError",
    "ResourceMeta",
    "ResourceType",
    "ValidationError",
    "build_actions",
    "canonicalize",
    "lookup",
    "parse_meta",
    "parse_resources",
    "read_actions_yaml",
    "read_resources_yaml",
]
