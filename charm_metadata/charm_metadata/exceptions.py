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

"""Custom exceptions for charm metadata parsing and validation."""

from typing import Optional, Sequence


class CharmMetadataError(Exception):
    """Base exception for charm metadata related errors.

    ``yaml_path`` is a JSON-pointer-like location of the offending value in the
    source document (e.g. ``/snapshot/params/outfile``), when known.
    """

    def __init__(self, message: str, yaml_path: Optional[str] = None):
        super().__init__(message)
        self.yaml_path = yaml_path


class ValidationError(CharmMetadataError):
    """Exception raised for validation errors."""
    pass


class NotValidError(ValidationError):
    """Exception raised when a resource descriptor breaks one of its invariants."""
    pass


class ParameterValidationError(ValidationError):
    """Exception raised when action parameters do not satisfy the action schema."""

    def __init__(self, message: str, issues: Sequence = (), yaml_path: Optional[str] = None):
        super().__init__(message, yaml_path=yaml_path)
        self.issues = tuple(issues)


class CanonicalizationError(CharmMetadataError):
    """Exception raised when a data tree cannot be used as schema content."""
    pass


class ReservedKeyError(CanonicalizationError):
    """Exception raised for reserved schema keys such as ``$ref``."""
    pass


class NonStringKeyError(CanonicalizationError):
    """Exception raised for mappings keyed with non-string values."""
    pass


class ActionsError(CharmMetadataError):
    """Exception raised for action specification errors."""
    pass


class InvalidActionNameError(ActionsError):
    """Exception raised when an action name does not follow the naming rule."""
    pass


class InvalidFieldTypeError(ActionsError):
    """Exception raised when a fixed action field has the wrong type."""
    pass


class InvalidParamsShapeError(ActionsError):
    """Exception raised when ``params`` is not a mapping."""
    pass


class InvalidSchemaDocumentError(ActionsError):
    """Exception raised when a built schema document is not a valid JSON Schema."""

    def __init__(self, message: str, action_name: Optional[str] = None, yaml_path: Optional[str] = None):
        super().__init__(message, yaml_path=yaml_path)
        self.action_name = action_name
