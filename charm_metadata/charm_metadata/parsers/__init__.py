from .actions_parser import ACTION_NAME_RULE, build_action_spec, build_actions, read_actions_yaml
from .metadata_parser import parse_resource_entry, parse_resources, read_resources_yaml, resources_section
from .yaml_parser import YamlParser, yaml_parser
