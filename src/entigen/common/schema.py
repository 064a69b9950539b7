from abc import ABC, abstractmethod
from typing import Any, Dict, List, Sequence, Tuple

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError

from entigen.common.helpers import DEFAULT_POOL_NAME
from entigen.exceptions import SchemaError


class FieldInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    type: str


class ComponentInfo(BaseModel):
    """One data model component: its fields and the pools it lives in."""
    model_config = ConfigDict(frozen=True)

    name: str
    fields: Tuple[FieldInfo, ...] = ()
    pools: Tuple[str, ...] = (DEFAULT_POOL_NAME,)
    is_single_entity: bool = False


class GeneratedFile(BaseModel):
    """A named unit of generated text, written to <file_name>.cs by the directory manager."""
    model_config = ConfigDict(frozen=True)

    file_name: str
    generator_name: str
    file_content: str


class DataProvider(ABC):
    """
    Read-only view of the data model handed to the code generator.
    """

    @property
    @abstractmethod
    def pool_names(self) -> Sequence[str]: ...

    @property
    @abstractmethod
    def blueprint_names(self) -> Sequence[str]: ...

    @property
    @abstractmethod
    def component_infos(self) -> Sequence[ComponentInfo]: ...


class Schema(DataProvider):

    def __init__(self, schema_path: str):
        self.schema_path = schema_path
        try:
            with open(schema_path, "r") as file:
                schema = yaml.safe_load(file)
        except OSError as e:
            raise SchemaError(f"could not read schema: {e}", schema_path) from e
        except yaml.YAMLError as e:
            raise SchemaError(f"invalid YAML: {e}", schema_path) from e
        self._load(schema)

    @classmethod
    def from_dict(cls, schema: Dict[str, Any]) -> "Schema":
        instance = cls.__new__(cls)
        instance.schema_path = None
        instance._load(schema)
        return instance

    def _load(self, schema):
        if schema is None:
            schema = {}
        if not isinstance(schema, dict):
            raise SchemaError("schema must be a mapping", self.schema_path)
        self.schema = schema
        self._pool_names = tuple(self._get_list('_pools', [DEFAULT_POOL_NAME]))
        self._blueprint_names = tuple(self._get_list('_blueprints', []))
        self._component_infos = tuple(self._build_components())

    @property
    def pool_names(self) -> Tuple[str, ...]:
        return self._pool_names

    @property
    def blueprint_names(self) -> Tuple[str, ...]:
        return self._blueprint_names

    @property
    def component_infos(self) -> Tuple[ComponentInfo, ...]:
        return self._component_infos

    def component(self, component_name: str) -> ComponentInfo:
        for info in self._component_infos:
            if info.name == component_name:
                return info
        raise KeyError(component_name)

    def _get_list(self, object_name: str, default: List[str]) -> List[str]:
        value = self.schema.get(object_name)
        if value is None:
            return list(default)
        if not isinstance(value, list) or not all(isinstance(v, str) and v.strip() for v in value):
            raise SchemaError(f"'{object_name}' must be a list of non-empty names", self.schema_path)
        return value

    def _build_components(self) -> List[ComponentInfo]:
        components = self.schema.get('_components') or {}
        if not isinstance(components, dict):
            raise SchemaError("'_components' must be a mapping of component name to definition", self.schema_path)

        infos = []
        for name, defs in components.items():
            defs = defs or {}
            if not isinstance(defs, dict):
                raise SchemaError(f"component '{name}' must be a mapping", self.schema_path)

            pools = defs.get("pools") or [DEFAULT_POOL_NAME]
            if not isinstance(pools, list):
                raise SchemaError(f"component '{name}' pools must be a list", self.schema_path)
            unknown = [pool for pool in pools if pool not in self._pool_names]
            if unknown:
                raise SchemaError(f"component '{name}' references unknown pools: {unknown}", self.schema_path)

            fields = defs.get("fields") or {}
            if not isinstance(fields, dict):
                raise SchemaError(f"component '{name}' fields must be a mapping of field name to type", self.schema_path)

            try:
                infos.append(ComponentInfo(
                    name=name,
                    fields=tuple(FieldInfo(name=field_name, type=str(field_type))
                                 for field_name, field_type in fields.items()),
                    pools=tuple(pools),
                    is_single_entity=bool(defs.get("single_entity", False)),
                ))
            except ValidationError as e:
                raise SchemaError(f"invalid component '{name}': {e}", self.schema_path) from e
        return infos
