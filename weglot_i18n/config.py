import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Mapping, Optional

from dotenv import load_dotenv

from weglot_i18n.exceptions import ConfigurationMissing

ACTION_NAME = "[Weglot-i18n File Generator]"

# Provider configuration constants
WEGLOT_BASE_URL = "https://api.weglot.com"
WEGLOT_SETTINGS_URL = "https://cdn.weglot.com/projects-settings"
USER_AGENT = "PostmanRuntime/7.37.3"
API_KEY_PREFIX = "wg_"

PROVIDER_DEFAULTS = {
    "timeout": 120,
}

LOG_MODES = ("off", "info", "debug")
DEFAULT_LOG_MODE = "info"

REQUIRED_SETTINGS = ("WEGLOT_API_KEY", "WEGLOT_REQUEST_URL", "LOCALES_DIR")

_TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass(frozen=True)
class AppConfig:
    """Settings for one generator run, resolved once at startup."""
    api_key: str
    request_url: str
    locales_dir: Path
    source_language: Optional[str] = None
    target_languages: List[str] = field(default_factory=list)
    timeout: float = PROVIDER_DEFAULTS["timeout"]
    base_url: str = WEGLOT_BASE_URL
    settings_url: str = WEGLOT_SETTINGS_URL
    log_mode: str = DEFAULT_LOG_MODE
    translate_non_string_leaves: bool = False
    strict_batch_alignment: bool = True

    @property
    def project_id(self) -> str:
        """Weglot project id, derived from the API key."""
        return self.api_key.replace(API_KEY_PREFIX, "")


def _read(env: Mapping[str, str], name: str) -> str:
    return (env.get(name) or "").strip()


def _read_flag(env: Mapping[str, str], name: str, default: bool) -> bool:
    value = _read(env, name)
    if not value:
        return default
    return value.lower() in _TRUE_VALUES


def parse_language_list(value: str) -> List[str]:
    """Split a comma separated language list, dropping blanks and repeats."""
    languages: List[str] = []
    for code in value.split(","):
        code = code.strip()
        if code and code not in languages:
            languages.append(code)
    return languages


def get_log_mode(env: Optional[Mapping[str, str]] = None) -> str:
    """Get log mode from the environment."""
    env = os.environ if env is None else env
    mode = _read(env, "LOG_MODE").lower()
    return mode if mode in LOG_MODES else DEFAULT_LOG_MODE


def load_config(env: Optional[Mapping[str, str]] = None) -> AppConfig:
    """
    Build the run configuration from environment variables.

    When no mapping is given, a .env file in the working directory is loaded
    first (real environment variables win) and os.environ is read.

    Raises:
        ConfigurationMissing: If a required setting is absent or a value is invalid.
    """
    if env is None:
        load_dotenv(override=False)
        env = os.environ

    values: Dict[str, str] = {}
    for name in REQUIRED_SETTINGS:
        value = _read(env, name)
        if not value:
            raise ConfigurationMissing(
                f"{name} is required",
                details={"missing_field": name},
            )
        values[name] = value

    working_dir = _read(env, "WORKING_DIR") or _read(env, "GITHUB_WORKSPACE") or os.getcwd()
    locales_dir = Path(working_dir) / values["LOCALES_DIR"]

    timeout_value = _read(env, "WEGLOT_TIMEOUT")
    try:
        timeout = float(timeout_value) if timeout_value else float(PROVIDER_DEFAULTS["timeout"])
    except ValueError:
        raise ConfigurationMissing(
            f"WEGLOT_TIMEOUT must be a number, got '{timeout_value}'",
            code="config_invalid",
            details={"invalid_field": "WEGLOT_TIMEOUT"},
        )

    return AppConfig(
        api_key=values["WEGLOT_API_KEY"],
        request_url=values["WEGLOT_REQUEST_URL"],
        locales_dir=locales_dir,
        source_language=_read(env, "SOURCE_LANGUAGE") or None,
        target_languages=parse_language_list(_read(env, "TARGET_LANGUAGES")),
        timeout=timeout,
        base_url=(_read(env, "WEGLOT_BASE_URL") or WEGLOT_BASE_URL).rstrip("/"),
        settings_url=WEGLOT_SETTINGS_URL,
        log_mode=get_log_mode(env),
        translate_non_string_leaves=_read_flag(env, "TRANSLATE_NON_STRING_LEAVES", False),
        strict_batch_alignment=_read_flag(env, "STRICT_BATCH_ALIGNMENT", True),
    )
