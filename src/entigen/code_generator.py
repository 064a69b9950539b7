"""
Generation orchestrator - runs generator plugins against a data model and writes their output
"""
import logging
from typing import Callable, List, NamedTuple, Optional, Sequence

from entigen.common.directory import CleanupWarning, clean_dir, get_safe_dir, write_files
from entigen.common.schema import DataProvider, GeneratedFile
from entigen.generators.base import BlueprintsCodeGenerator, ComponentCodeGenerator, PoolCodeGenerator

logger = logging.getLogger(__name__)

Handler = Callable[[Sequence], Sequence[GeneratedFile]]


class GeneratorHandlers(NamedTuple):
    """The capabilities a plugin implements, resolved once when it is registered."""
    generator: object
    pools: Optional[Handler] = None
    components: Optional[Handler] = None
    blueprints: Optional[Handler] = None


def classify(code_generator) -> GeneratorHandlers:
    return GeneratorHandlers(
        generator=code_generator,
        pools=code_generator.generate_pools if isinstance(code_generator, PoolCodeGenerator) else None,
        components=code_generator.generate_components if isinstance(code_generator, ComponentCodeGenerator) else None,
        blueprints=code_generator.generate_blueprints if isinstance(code_generator, BlueprintsCodeGenerator) else None,
    )


def generate(
    provider: DataProvider,
    directory,
    code_generators: Sequence,
    diagnostics: Optional[List[CleanupWarning]] = None,
) -> List[GeneratedFile]:
    """
    Run every generator against the provider and write the results under <directory>/Generated/.

    Pool generators run first, then component generators, then blueprint generators, each
    group in the order given. Files are written as soon as a generator returns, so output
    from earlier generators survives a later failure.
    """
    directory = get_safe_dir(directory)
    clean_dir(directory, diagnostics)

    registrations = [classify(code_generator) for code_generator in code_generators]
    phases = (
        ("pools", provider.pool_names),
        ("components", provider.component_infos),
        ("blueprints", provider.blueprint_names),
    )

    logger.info(f"Generating code in {directory} with {len(registrations)} generators")
    generated_files: List[GeneratedFile] = []
    for phase, model_slice in phases:
        for registration in registrations:
            handler = getattr(registration, phase)
            if handler is None:
                continue
            logger.debug(f"Running {type(registration.generator).__name__} ({phase})")
            files = list(handler(model_slice))
            generated_files.extend(files)
            write_files(directory, files)

    logger.info(f"Code generation complete: {len(generated_files)} files")
    return generated_files
