from .schema import ComponentInfo, DataProvider, FieldInfo, GeneratedFile, Schema
from .template import Templates, get_jinja_env
