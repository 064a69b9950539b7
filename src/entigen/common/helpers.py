import os
from typing import List

DEFAULT_POOL_NAME = "Pool"
COMPONENT_SUFFIX = "Component"
DEFAULT_COMPONENT_LOOKUP_TAG = "ComponentIds"


def uppercase_first(value: str) -> str:
    return value[:1].upper() + value[1:]


def lowercase_first(value: str) -> str:
    return value[:1].lower() + value[1:]


def pool_prefix(pool_name: str) -> str:
    """
    The default pool contributes no prefix, every other pool prefixes names with itself.
    """
    return "" if pool_name == DEFAULT_POOL_NAME else pool_name


def component_lookup_tags(component_info) -> List[str]:
    return [pool_prefix(pool) + DEFAULT_COMPONENT_LOOKUP_TAG for pool in component_info.pools]


def component_lookup_tag(component_info) -> str:
    tags = component_lookup_tags(component_info)
    return tags[0] if tags else DEFAULT_COMPONENT_LOOKUP_TAG


def remove_component_suffix(name: str) -> str:
    if name.endswith(COMPONENT_SUFFIX) and name != COMPONENT_SUFFIX:
        return name[:-len(COMPONENT_SUFFIX)]
    return name


def to_unix_line_endings(value: str) -> str:
    return value.replace("\r\n", "\n").replace(os.linesep, "\n")


def to_platform_line_endings(value: str) -> str:
    # normalize first so content that already has platform endings isn't doubled
    return to_unix_line_endings(value).replace("\n", os.linesep)
