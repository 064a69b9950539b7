"""
Code generator exception definitions.
"""


class CodeGeneratorError(Exception):
    """Base class for all code generation errors."""


class ConfigurationError(CodeGeneratorError):
    """Raised for an empty target directory, a bad config file or an unknown generator."""

    def __init__(self, message: str, setting: str | None = None):
        self.message = message
        self.setting = setting
        super().__init__(message)


class SchemaError(CodeGeneratorError):
    """Raised when a data model document can't be turned into pools, components and blueprints."""

    def __init__(self, message: str, schema_path=None):
        self.message = message
        self.schema_path = schema_path
        super().__init__(message if schema_path is None else f"{schema_path}: {message}")


class ArtifactWriteError(CodeGeneratorError):
    """Raised when a generated file can't be written. Files written before it stay on disk."""

    def __init__(self, path: str, e: OSError):
        self.path = path
        self.error = e
        super().__init__(f"Could not write file {path}: {e}")
