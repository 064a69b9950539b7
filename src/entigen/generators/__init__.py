"""
Generators Package

Built-in generator plugins for pools, components and blueprints, and the
registry used to look them up by name from the config file.
"""

from .base import BlueprintsCodeGenerator, CodeGenerator, ComponentCodeGenerator, PoolCodeGenerator
from .gen_blueprints import BlueprintsGenerator
from .gen_components import ComponentExtensionsGenerator, ComponentIndicesGenerator
from .gen_pools import PoolAttributeGenerator, PoolsGenerator

CODE_GENERATORS = {
    "pool_attributes": PoolAttributeGenerator,
    "pools": PoolsGenerator,
    "component_indices": ComponentIndicesGenerator,
    "component_extensions": ComponentExtensionsGenerator,
    "blueprints": BlueprintsGenerator,
}
