from abc import ABC, abstractmethod
from typing import List, Sequence

from entigen.common.schema import ComponentInfo, GeneratedFile


class CodeGenerator:
    """Common base for generator plugins. `name` ends up in the generated file header."""

    @property
    def name(self) -> str:
        return type(self).__name__

    def _file(self, file_name: str, lines) -> GeneratedFile:
        if isinstance(lines, list):
            lines = "\n".join(lines) + "\n"
        return GeneratedFile(file_name=file_name, generator_name=self.name, file_content=lines)


class PoolCodeGenerator(CodeGenerator, ABC):

    @abstractmethod
    def generate_pools(self, pool_names: Sequence[str]) -> List[GeneratedFile]: ...


class ComponentCodeGenerator(CodeGenerator, ABC):

    @abstractmethod
    def generate_components(self, component_infos: Sequence[ComponentInfo]) -> List[GeneratedFile]: ...


class BlueprintsCodeGenerator(CodeGenerator, ABC):

    @abstractmethod
    def generate_blueprints(self, blueprint_names: Sequence[str]) -> List[GeneratedFile]: ...
