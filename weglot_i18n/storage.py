"""
Locale file storage.

This module reads the source-language locale file and writes one
translated locale file per target language:
- Lookup by language code ('<code>.json' in the locales directory)
- Key order preserved on read and write
- Atomic writes (temp file + rename)
"""

import json
import tempfile
from pathlib import Path
from typing import Any

from weglot_i18n import language_codes as lc
from weglot_i18n.exceptions import MissingSourceDocument, OutputWriteFailure
from weglot_i18n.logger import get_logger

logger = get_logger(__name__)


def read_source_document(locales_dir: Path, language_code: str) -> Any:
    """
    Read and parse the locale file for the source language.

    Args:
        locales_dir: Directory holding the locale files
        language_code: Source language code

    Returns:
        Parsed JSON document (dict insertion order follows the file)

    Raises:
        MissingSourceDocument: If the file is absent, unreadable or not valid JSON
    """
    if not lc.is_valid_language_code(language_code):
        raise MissingSourceDocument(
            f"Invalid source language code: '{language_code}'",
            details={"language": language_code},
        )

    file_path = lc.get_language_file_path(locales_dir, language_code)
    logger.debug(f"Reading source locale file: {file_path}")

    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except FileNotFoundError:
        raise MissingSourceDocument(
            f"Source locale file not found: {file_path}",
            details={"language": language_code, "path": str(file_path)},
        )
    except json.JSONDecodeError as e:
        raise MissingSourceDocument(
            f"Source locale file is not valid JSON: {file_path} ({e})",
            details={"language": language_code, "path": str(file_path)},
        )
    except OSError as e:
        raise MissingSourceDocument(
            f"Failed to read source locale file {file_path}: {e}",
            details={"language": language_code, "path": str(file_path)},
        )


def write_translated_document(locales_dir: Path, language_code: str, data: Any) -> Path:
    """
    Write a translated locale file, pretty-printed with 2-space indent.

    Returns:
        Path of the written file

    Raises:
        OutputWriteFailure: If the code is unusable as a file name or the write fails
    """
    if not lc.is_valid_language_code(language_code):
        raise OutputWriteFailure(
            f"Invalid target language code: '{language_code}'",
            details={"language": language_code},
        )

    file_path = lc.get_language_file_path(locales_dir, language_code)
    _atomic_write_json(file_path, data)
    logger.debug(f"Wrote locale file: {file_path}")
    return file_path


def _atomic_write_json(file_path: Path, data: Any):
    """
    Write JSON to a temp file in the same directory, then rename it over
    the target so a failed write never leaves a partial file.
    """
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        temp_fd, temp_name = tempfile.mkstemp(
            dir=file_path.parent,
            prefix=f".{file_path.stem}_",
            suffix=".json.tmp"
        )
    except OSError as e:
        raise OutputWriteFailure(f"Failed to prepare {file_path}: {e}")

    temp_path = Path(temp_name)

    try:
        with open(temp_fd, 'w', encoding='utf-8') as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
            f.write('\n')

        temp_path.replace(file_path)

    except (OSError, TypeError, ValueError) as e:
        if temp_path.exists():
            temp_path.unlink()
        raise OutputWriteFailure(
            f"Failed to write {file_path}: {e}",
            details={"path": str(file_path)},
        )
