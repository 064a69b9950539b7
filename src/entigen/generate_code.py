#!/usr/bin/env python3
"""
Code generation script - Generates pool, component and blueprint code from a schema
"""
import logging
import sys

from entigen.code_generator import generate
from entigen.common.schema import Schema
from entigen.config import load_config
from entigen.exceptions import CodeGeneratorError

logger = logging.getLogger(__name__)


def generate_code(schema_file, target_directory=None, config_file=None) -> int:
    """
    Main entry point for code generation
    """
    try:
        config = load_config(config_file)
        logging.getLogger("entigen").setLevel(config.log_level.upper())

        schema = Schema(schema_file)
        directory = target_directory or config.target_directory
        warnings = []
        files = generate(schema, directory, config.generators(), warnings)
    except CodeGeneratorError as e:
        logger.error(f"Error during code generation: {e}")
        return 1

    if warnings:
        logger.warning(f"{len(warnings)} previously generated files could not be removed")
    logger.info(f"Generated {len(files)} files")
    return 0


def main():
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s", level=logging.INFO)
    if len(sys.argv) < 2:
        print("Usage: entigen <schema.yaml> [<target_dir>] [<config.yaml>]")
        sys.exit(1)

    schema_file = sys.argv[1]
    target_directory = sys.argv[2] if len(sys.argv) > 2 else None
    config_file = sys.argv[3] if len(sys.argv) > 3 else None
    sys.exit(generate_code(schema_file, target_directory, config_file))


if __name__ == "__main__":
    main()
