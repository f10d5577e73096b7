from .actions import DEFAULT_DESCRIPTION, ActionSpec, Actions
from .resource import ResourceMeta, ResourceType, parse_meta
