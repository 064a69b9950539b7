from pathlib import Path
from typing import List, Sequence

from entigen.common.helpers import uppercase_first
from entigen.common.schema import GeneratedFile
from entigen.common.template import Templates
from entigen.generators.base import BlueprintsCodeGenerator

BASE_DIR = Path(__file__).resolve().parent


class BlueprintsGenerator(BlueprintsCodeGenerator):

    def __init__(self):
        self.templates = Templates(BASE_DIR, "blueprints")

    def generate_blueprints(self, blueprint_names: Sequence[str]) -> List[GeneratedFile]:
        if not blueprint_names:
            return []

        methods = [
            f'public static Blueprint {uppercase_first(name.replace(" ", ""))}(this Blueprints blueprints) '
            f'{{ return blueprints.GetBlueprint("{name}"); }}'
            for name in blueprint_names
        ]
        rendered = self.templates.render("blueprints", {"Methods": methods})
        return [self._file("BlueprintsGeneratedExtension", rendered)]
