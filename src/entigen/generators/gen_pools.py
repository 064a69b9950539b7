import logging
from pathlib import Path
from typing import List, Sequence

from entigen.common.helpers import DEFAULT_COMPONENT_LOOKUP_TAG, DEFAULT_POOL_NAME, lowercase_first, pool_prefix
from entigen.common.schema import GeneratedFile
from entigen.common.template import Templates, get_jinja_env
from entigen.generators.base import PoolCodeGenerator

logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent


class PoolAttributeGenerator(PoolCodeGenerator):
    """One <Pool>Attribute class per non-default pool, used to tag components with their pools."""

    def __init__(self):
        self.templates = Templates(BASE_DIR, "pools")

    def generate_pools(self, pool_names: Sequence[str]) -> List[GeneratedFile]:
        files = []
        for pool in pool_names:
            if pool == DEFAULT_POOL_NAME:
                continue
            rendered = self.templates.render("attribute", {"Pool": pool})
            files.append(self._file(f"{pool}Attribute", rendered))
        return files


class PoolsGenerator(PoolCodeGenerator):

    def __init__(self):
        self.env = get_jinja_env(BASE_DIR, "pools")

    def generate_pools(self, pool_names: Sequence[str]) -> List[GeneratedFile]:
        logger.debug(f"Generating Pools for {len(pool_names)} pools")
        pools = [
            {
                "name": pool,
                "field": lowercase_first(pool_prefix(pool) + DEFAULT_POOL_NAME),
                "tag": pool_prefix(pool) + DEFAULT_COMPONENT_LOOKUP_TAG,
            }
            for pool in pool_names
        ]
        rendered = self.env.get_template("pools.j2").render(pools=pools)
        return [self._file("Pools", rendered)]
