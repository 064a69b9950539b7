import pytest

from entigen.common.schema import Schema
from entigen.generators.base import BlueprintsCodeGenerator, ComponentCodeGenerator, PoolCodeGenerator

SCHEMA = {
    "_pools": ["Pool", "Enemy"],
    "_blueprints": ["Player", "Big Boss"],
    "_components": {
        "PositionComponent": {"pools": ["Pool", "Enemy"], "fields": {"x": "float", "y": "float"}},
        "HealthComponent": {"fields": {"value": "int"}},
        "PlayerComponent": {"single_entity": True},
    },
}


@pytest.fixture
def schema():
    return Schema.from_dict(SCHEMA)


@pytest.fixture
def schema_file(tmp_path):
    path = tmp_path / "schema.yaml"
    path.write_text(
        "_pools: [Pool, Enemy]\n"
        "_blueprints: [Player]\n"
        "_components:\n"
        "  PositionComponent:\n"
        "    pools: [Pool, Enemy]\n"
        "    fields:\n"
        "      x: float\n"
        "      y: float\n"
        "  PlayerComponent:\n"
        "    single_entity: true\n"
    )
    return path


class RecordingGenerator:
    """Records every call it receives into a shared log."""

    def __init__(self, label, calls, directory=None):
        self.label = label
        self.calls = calls
        self.directory = directory

    def _record(self, phase, model_slice):
        self.calls.append((self.label, phase, list(model_slice)))
        return [self._file(f"{self.label}{phase.capitalize()}", f"// {self.label} {phase}\n")]


class PoolRecorder(RecordingGenerator, PoolCodeGenerator):
    def generate_pools(self, pool_names):
        return self._record("pools", pool_names)


class ComponentRecorder(RecordingGenerator, ComponentCodeGenerator):
    def generate_components(self, component_infos):
        return self._record("components", [info.name for info in component_infos])


class BlueprintRecorder(RecordingGenerator, BlueprintsCodeGenerator):
    def generate_blueprints(self, blueprint_names):
        return self._record("blueprints", blueprint_names)


class EverythingRecorder(RecordingGenerator, PoolCodeGenerator, ComponentCodeGenerator, BlueprintsCodeGenerator):
    def generate_pools(self, pool_names):
        return self._record("pools", pool_names)

    def generate_components(self, component_infos):
        return self._record("components", [info.name for info in component_infos])

    def generate_blueprints(self, blueprint_names):
        return self._record("blueprints", blueprint_names)
