"""Schema compilation and validation.

This package wraps the JSON Schema engine behind a narrow interface so that
the action builders only deal with schema documents and validation results.
"""

from .json_schema import (
    CompiledSchema,
    SchemaIssue,
    ValidationResult,
    compile_schema,
    get_validator_class,
    resolve_draft,
)
