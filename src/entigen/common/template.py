import logging
import re
from pathlib import Path
from typing import Dict, List, Mapping, Union

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from entigen.common import helpers

logger = logging.getLogger(__name__)

PLACEHOLDER_PATTERN = re.compile(r"\{\{(\w+)\}\}")


class Templates:
    """Line templates (*.tpl) for one generator, loaded from <base_dir>/templates/<component>."""

    def __init__(self, base_dir: Path, component: str):
        self.templates: Dict[str, List[str]] = {}
        template_dir = Path(base_dir) / "templates" / component
        for fn in template_dir.iterdir():
            if fn.suffix == ".tpl":
                name = fn.name[:-len(fn.suffix)]
                self.templates[name] = fn.read_text(encoding="utf-8").splitlines()

    def list(self) -> List[str]:
        """
        List all available templates.
        """
        return sorted(self.templates.keys())

    def _get_template(self, tpl_name: str) -> List[str]:
        if tpl_name not in self.templates:
            raise RuntimeError(f"Template '{tpl_name}' not found, available templates: {', '.join(self.list())}")
        return self.templates[tpl_name]

    def render(self, tpl_name: str, vars_map: Mapping[str, Union[str, List[str]]]) -> List[str]:
        """
        Single-pass {{Key}}→vars_map[Key] substitution.
        - Lines referencing a var not in vars_map are dropped with a warning.
        - If a line is exactly '{{Key}}', the value may be a string or list:
          • empty or empty list → skip line
          • non-empty string  → split on '\n' and emit each non-empty line
          • list of strings   → emit each non-empty item
        - Inline placeholders (with other text on the line) expect only strings.
        """
        lines = self._get_template(tpl_name)
        output: List[str] = []
        for raw in lines:
            keys = PLACEHOLDER_PATTERN.findall(raw)
            missing = [k for k in keys if k not in vars_map]
            if missing:
                logger.warning(f"Template {tpl_name} references unknown vars: {missing}")
                continue

            stripped = raw.strip()
            # standalone placeholder may be string or list
            if len(keys) == 1 and stripped == f"{{{{{keys[0]}}}}}":
                val = vars_map[keys[0]]
                if isinstance(val, list):
                    items = val
                else:
                    items = str(val).splitlines()
                indent = raw[: len(raw) - len(raw.lstrip())]
                for item in items:
                    if item:
                        output.append(indent + item)
            else:
                line = raw
                for k in keys:
                    line = line.replace(f"{{{{{k}}}}}", str(vars_map[k]))
                output.append(line)

        return output


def get_jinja_env(base_dir: Path, component: str) -> Environment:
    template_dir = Path(base_dir) / "templates" / component
    env = Environment(
        loader=FileSystemLoader(str(template_dir)),
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        undefined=StrictUndefined,
    )
    env.filters['uppercase_first'] = helpers.uppercase_first
    env.filters['lowercase_first'] = helpers.lowercase_first
    env.filters['pool_prefix'] = helpers.pool_prefix
    env.filters['remove_component_suffix'] = helpers.remove_component_suffix
    return env
