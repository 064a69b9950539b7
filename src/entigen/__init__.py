from .code_generator import classify, generate
from .common.schema import ComponentInfo, DataProvider, FieldInfo, GeneratedFile, Schema
from .exceptions import ArtifactWriteError, CodeGeneratorError, ConfigurationError, SchemaError
