import logging
import os
from pathlib import Path
from typing import List, NamedTuple, Optional, Sequence

from entigen.common.helpers import to_platform_line_endings
from entigen.common.schema import GeneratedFile
from entigen.exceptions import ArtifactWriteError, ConfigurationError

logger = logging.getLogger(__name__)

GENERATED_DIR_NAME = "Generated"
GENERATED_FILE_EXTENSION = ".cs"
AUTO_GENERATED_HEADER_FORMAT = """//------------------------------------------------------------------------------
// <auto-generated>
//     This code was generated by {0}.
//
//     Changes to this file may cause incorrect behavior and will be lost if
//     the code is regenerated.
// </auto-generated>
//------------------------------------------------------------------------------
"""


class CleanupWarning(NamedTuple):
    path: str
    reason: str


def get_safe_dir(directory) -> str:
    """
    Normalize a target directory so it ends in 'Generated/'.
    Applying it to its own output returns the same path.
    """
    directory = os.fspath(directory) if directory is not None else ""
    if not directory.strip():
        raise ConfigurationError("Target directory must not be empty", "target_directory")

    if not directory.endswith("/"):
        directory += "/"
    if directory.rstrip("/").replace("\\", "/").split("/")[-1] != GENERATED_DIR_NAME:
        directory += GENERATED_DIR_NAME + "/"
    return directory


def clean_dir(directory, diagnostics: Optional[List[CleanupWarning]] = None) -> List[CleanupWarning]:
    """
    Delete previously generated files under the resolved directory, or create it.
    Deletion is best effort: failures are logged, collected and returned.
    """
    path = Path(get_safe_dir(directory))
    warnings: List[CleanupWarning] = []

    if path.exists() and not path.is_dir():
        raise ConfigurationError(f"Target directory {path} exists and is not a directory", "target_directory")

    if not path.exists():
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ConfigurationError(f"Could not create target directory {path}: {e}", "target_directory") from e
        return warnings

    for file in sorted(path.rglob("*" + GENERATED_FILE_EXTENSION)):
        if not file.is_file():
            continue
        try:
            file.unlink()
        except OSError as e:
            warning = CleanupWarning(str(file), str(e))
            logger.warning(f"Could not delete file {file}: {e}")
            warnings.append(warning)

    if diagnostics is not None:
        diagnostics.extend(warnings)
    return warnings


def write_files(directory: str, files: Sequence[GeneratedFile]) -> None:
    # re-checked here, a generator may run without clean_dir having created the directory
    try:
        Path(directory).mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ArtifactWriteError(directory, e) from e

    for file in files:
        file_name = directory + file.file_name + GENERATED_FILE_EXTENSION
        header = AUTO_GENERATED_HEADER_FORMAT.format(file.generator_name)
        content = to_platform_line_endings(header + file.file_content)
        try:
            with open(file_name, "w", encoding="utf-8", newline="") as f:
                f.write(content)
        except OSError as e:
            raise ArtifactWriteError(file_name, e) from e
        logger.debug(f"Generated {file_name}")
