import logging
from pathlib import Path
from typing import Dict, List, Sequence

from entigen.common.helpers import (
    DEFAULT_COMPONENT_LOOKUP_TAG,
    component_lookup_tag,
    component_lookup_tags,
    pool_prefix,
    remove_component_suffix,
    uppercase_first,
)
from entigen.common.schema import ComponentInfo, GeneratedFile
from entigen.common.template import get_jinja_env
from entigen.generators.base import ComponentCodeGenerator, PoolCodeGenerator

logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent


class ComponentIndicesGenerator(PoolCodeGenerator, ComponentCodeGenerator):
    """
    Emits one lookup class per lookup tag (ComponentIds, EnemyComponentIds, ...).
    Indices follow component order within each pool. Pools seen in the pool phase
    get a lookup class even when no component belongs to them, so every
    <Prefix>ComponentIds referenced by Pools exists.
    """

    def __init__(self):
        self.env = get_jinja_env(BASE_DIR, "components")
        self.pool_names: List[str] = []

    def generate_pools(self, pool_names: Sequence[str]) -> List[GeneratedFile]:
        self.pool_names = list(pool_names)
        return []

    def generate_components(self, component_infos: Sequence[ComponentInfo]) -> List[GeneratedFile]:
        lookups: Dict[str, List[str]] = {
            pool_prefix(pool) + DEFAULT_COMPONENT_LOOKUP_TAG: [] for pool in self.pool_names
        }
        for info in component_infos:
            for tag in component_lookup_tags(info):
                lookups.setdefault(tag, []).append(remove_component_suffix(info.name))

        template = self.env.get_template("indices.j2")
        return [
            self._file(tag, template.render(tag=tag, components=components))
            for tag, components in lookups.items()
        ]


class ComponentExtensionsGenerator(ComponentCodeGenerator):

    def __init__(self):
        self.env = get_jinja_env(BASE_DIR, "components")

    def generate_components(self, component_infos: Sequence[ComponentInfo]) -> List[GeneratedFile]:
        template = self.env.get_template("extension.j2")
        files = []
        for info in component_infos:
            short = remove_component_suffix(info.name)
            args = ", ".join(f"{field.type} new{uppercase_first(field.name)}" for field in info.fields)
            rendered = template.render(
                type=info.name,
                short=short,
                tag=component_lookup_tag(info),
                fields=info.fields,
                args=args,
                single_entity=info.is_single_entity,
            )
            files.append(self._file(f"{info.name}GeneratedExtension", rendered))
        logger.debug(f"Generated extensions for {len(files)} components")
        return files
