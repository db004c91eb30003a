"""
Language code helpers.

Weglot identifies languages by short codes ('en', 'fr', 'pt-br', 'zh', 'tw').
The code also names the locale file: language 'fr' lives in 'fr.json'.
"""

import re
from pathlib import Path
from typing import Optional

# Display names for codes commonly enabled in Weglot projects, used in logs only
LANGUAGE_NAMES = {
    'ar': 'Arabic',
    'bg': 'Bulgarian',
    'cs': 'Czech',
    'da': 'Danish',
    'de': 'German',
    'el': 'Greek',
    'en': 'English',
    'es': 'Spanish',
    'fi': 'Finnish',
    'fr': 'French',
    'he': 'Hebrew',
    'hi': 'Hindi',
    'hu': 'Hungarian',
    'id': 'Indonesian',
    'it': 'Italian',
    'ja': 'Japanese',
    'ko': 'Korean',
    'nl': 'Dutch',
    'no': 'Norwegian',
    'pl': 'Polish',
    'pt': 'Portuguese',
    'pt-br': 'Portuguese (Brazil)',
    'ro': 'Romanian',
    'ru': 'Russian',
    'sk': 'Slovak',
    'sv': 'Swedish',
    'th': 'Thai',
    'tr': 'Turkish',
    'tw': 'Chinese (Traditional)',
    'uk': 'Ukrainian',
    'vi': 'Vietnamese',
    'zh': 'Chinese (Simplified)',
}

# Letters, digits and hyphens; rules out path separators in file names
_CODE_PATTERN = re.compile(r'^[A-Za-z]{2,3}(-[A-Za-z0-9]{2,8})*$')


def is_valid_language_code(code: str) -> bool:
    """
    Check that a code is safe to use as a locale file name.

    Examples:
        >>> is_valid_language_code('pt-br')
        True
        >>> is_valid_language_code('../en')
        False
    """
    return bool(code) and bool(_CODE_PATTERN.match(code))


def get_language_name(code: str) -> Optional[str]:
    """Get the display name for a code, or None if unknown."""
    return LANGUAGE_NAMES.get(code.lower())


def describe_language(code: str) -> str:
    name = get_language_name(code)
    return f"{name} ({code})" if name else code


def languages_match(code1: str, code2: str) -> bool:
    """
    Check if two codes name the same language (case-insensitive).

    Regional variants are distinct languages for Weglot, so 'pt' and
    'pt-br' do not match.
    """
    return code1.strip().lower() == code2.strip().lower()


def get_language_file_name(language_code: str) -> str:
    """
    Get the locale file name for a language.

    Examples:
        >>> get_language_file_name('fr')
        'fr.json'
    """
    return f"{language_code}.json"


def get_language_file_path(locales_dir: Path, language_code: str) -> Path:
    return Path(locales_dir) / get_language_file_name(language_code)
