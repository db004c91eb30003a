"""
Weglot API Implementation

Calls the Weglot translate endpoint with a whole batch of words and reads
the public project settings to discover the enabled languages.
No retries: any failure is raised as ProviderCallFailure.
"""

from typing import Any, Dict, List, Optional

import httpx

from weglot_i18n.config import PROVIDER_DEFAULTS, USER_AGENT, WEGLOT_BASE_URL, WEGLOT_SETTINGS_URL
from weglot_i18n.exceptions import ConfigurationMissing, ProviderCallFailure
from weglot_i18n.logger import get_logger
from weglot_i18n.provider.base import BatchTranslation, ProjectSettings, TranslationProvider

logger = get_logger(__name__)


def get_httpx_timeout(timeout: Optional[float]) -> httpx.Timeout:
    """httpx timeouts with the configured read timeout in seconds."""
    timeout_value = float(timeout) if timeout else float(PROVIDER_DEFAULTS['timeout'])
    return httpx.Timeout(
        connect=10.0,
        write=60.0,
        read=timeout_value,
        pool=10.0,
    )


def handle_http_error(e: httpx.HTTPStatusError, action: str):
    """Raise ProviderCallFailure with the error message Weglot returned, if any."""
    status_code = e.response.status_code
    error_text = "Unknown error"

    try:
        error_json = e.response.json()
        if isinstance(error_json, dict) and "error" in error_json:
            error_detail = error_json["error"]
            if isinstance(error_detail, dict):
                error_text = error_detail.get("message", str(error_detail))
            else:
                error_text = str(error_detail)
    except ValueError:
        error_text = e.response.text[:500] or "No details"

    raise ProviderCallFailure(
        f"Weglot {action} error ({status_code}): {error_text}",
        details={"status_code": status_code},
    )


def _request(client: Optional[httpx.Client], timeout: float, method: str, url: str, **kwargs) -> httpx.Response:
    """Send one request, using the shared client if one was given."""
    headers = {"User-Agent": USER_AGENT}
    if client is not None:
        return client.request(method, url, headers=headers, **kwargs)
    with httpx.Client(timeout=get_httpx_timeout(timeout)) as own_client:
        return own_client.request(method, url, headers=headers, **kwargs)


def _call_json(client: Optional[httpx.Client], timeout: float, action: str, method: str, url: str, **kwargs) -> Any:
    # Query strings carry the API key, so error messages never include the URL
    try:
        response = _request(client, timeout, method, url, **kwargs)
        response.raise_for_status()
        return response.json()
    except httpx.HTTPStatusError as e:
        logger.error(f"Weglot {action} HTTP error: {e.response.status_code}")
        handle_http_error(e, action)
    except httpx.TimeoutException:
        raise ProviderCallFailure(f"Weglot {action} request timeout")
    except httpx.HTTPError as e:
        raise ProviderCallFailure(f"Weglot {action} request failed: {type(e).__name__}: {e}")
    except ValueError:
        raise ProviderCallFailure(f"Weglot {action} returned a non-JSON response")


class WeglotProvider(TranslationProvider):
    """Batch translation through the Weglot /translate endpoint."""

    def __init__(
        self,
        api_key: str,
        base_url: str = WEGLOT_BASE_URL,
        timeout: float = PROVIDER_DEFAULTS['timeout'],
        client: Optional[httpx.Client] = None,
    ):
        if not api_key:
            raise ConfigurationMissing(
                "Weglot API key not configured",
                details={"missing_field": "WEGLOT_API_KEY"},
            )
        self.api_key = api_key
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self._client = client

    def translate(
        self,
        source_language: str,
        target_language: str,
        request_url: str,
        words: List[Dict[str, Any]],
    ) -> BatchTranslation:
        body = {
            "l_from": source_language,
            "l_to": target_language,
            "title": "",
            "request_url": request_url,
            "bot": 0,
            "words": words,
        }

        logger.debug(f"Calling Weglot translate: {len(words)} words, {source_language} -> {target_language}")

        result = _call_json(
            self._client,
            self.timeout,
            "translate",
            "POST",
            f"{self.base_url}/translate",
            params={"api_key": self.api_key},
            json=body,
        )

        to_words = result.get("to_words") if isinstance(result, dict) else None
        if not isinstance(to_words, list):
            raise ProviderCallFailure(
                "Unexpected Weglot translate response: 'to_words' missing",
                details={"target_language": target_language},
            )

        logger.debug(f"Received {len(to_words)} words from Weglot for {target_language}")

        return BatchTranslation(
            requested=[word["w"] for word in words],
            translated=to_words,
        )


def fetch_project_settings(
    project_id: str,
    settings_url: str = WEGLOT_SETTINGS_URL,
    timeout: float = PROVIDER_DEFAULTS['timeout'],
    client: Optional[httpx.Client] = None,
) -> ProjectSettings:
    """
    Read the public Weglot project settings.

    Returns:
        ProjectSettings with the original language and the enabled target
        languages, in the order Weglot lists them

    Raises:
        ProviderCallFailure: If the settings cannot be fetched
        ConfigurationMissing: If the settings have no original language
    """
    logger.debug(f"Fetching Weglot project settings for {project_id}")

    settings = _call_json(
        client,
        timeout,
        "project settings",
        "GET",
        f"{settings_url.rstrip('/')}/{project_id}.json",
    )

    if not isinstance(settings, dict) or not settings.get("language_from"):
        raise ConfigurationMissing(
            "Weglot project settings have no original language",
            details={"missing_field": "language_from"},
        )

    target_languages: List[str] = []
    for language in settings.get("languages") or []:
        if not isinstance(language, dict) or not language.get("enabled"):
            continue
        code = language.get("language_to")
        if code and code not in target_languages:
            target_languages.append(code)

    return ProjectSettings(
        source_language=settings["language_from"],
        target_languages=target_languages,
    )
