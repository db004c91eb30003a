import json

import httpx
import pytest

from weglot_i18n.config import USER_AGENT
from weglot_i18n.exceptions import ConfigurationMissing, ProviderCallFailure
from weglot_i18n.provider import WeglotProvider, build_words, fetch_project_settings
from weglot_i18n.provider.weglot import get_httpx_timeout


def _client(handler):
    return httpx.Client(transport=httpx.MockTransport(handler))


def test_build_words_marks_every_entry_as_text():
    assert build_words(["Hello", "Home"]) == [{"w": "Hello", "t": 1}, {"w": "Home", "t": 1}]


def test_translate_posts_batch_and_returns_aligned_result():
    seen = {}

    def handler(request):
        seen["method"] = request.method
        seen["path"] = request.url.path
        seen["api_key"] = request.url.params["api_key"]
        seen["user_agent"] = request.headers["user-agent"]
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"to_words": ["Bonjour {{1}}", "Accueil"]})

    provider = WeglotProvider("wg_secret", client=_client(handler))
    result = provider.translate("en", "fr", "https://example.com", build_words(["Hello {{1}}", "Home"]))

    assert seen["method"] == "POST"
    assert seen["path"] == "/translate"
    assert seen["api_key"] == "wg_secret"
    assert seen["user_agent"] == USER_AGENT
    assert seen["body"] == {
        "l_from": "en",
        "l_to": "fr",
        "title": "",
        "request_url": "https://example.com",
        "bot": 0,
        "words": [{"w": "Hello {{1}}", "t": 1}, {"w": "Home", "t": 1}],
    }
    assert result.requested == ["Hello {{1}}", "Home"]
    assert result.translated == ["Bonjour {{1}}", "Accueil"]


def test_translate_uses_configured_base_url():
    def handler(request):
        assert request.url.host == "weglot.test"
        return httpx.Response(200, json={"to_words": ["Hola"]})

    provider = WeglotProvider("wg_key", base_url="https://weglot.test/", client=_client(handler))
    assert provider.translate("en", "es", "", build_words(["Hello"])).translated == ["Hola"]


def test_translate_http_error_raises_provider_failure_without_api_key():
    def handler(request):
        return httpx.Response(401, json={"succeeded": 0, "error": "Wrong API key"})

    provider = WeglotProvider("wg_secret", client=_client(handler))

    with pytest.raises(ProviderCallFailure) as exc_info:
        provider.translate("en", "fr", "", build_words(["Hello"]))

    message = str(exc_info.value)
    assert "401" in message
    assert "Wrong API key" in message
    assert "wg_secret" not in message
    assert exc_info.value.details == {"status_code": 401}
    assert exc_info.value.code == "provider_call_failed"


def test_translate_http_error_with_plain_text_body():
    def handler(request):
        return httpx.Response(502, text="Bad Gateway")

    provider = WeglotProvider("wg_key", client=_client(handler))

    with pytest.raises(ProviderCallFailure, match="502"):
        provider.translate("en", "fr", "", build_words(["Hello"]))


def test_translate_missing_to_words_raises_provider_failure():
    provider = WeglotProvider("wg_key", client=_client(lambda request: httpx.Response(200, json={})))

    with pytest.raises(ProviderCallFailure, match="to_words"):
        provider.translate("en", "fr", "", build_words(["Hello"]))


def test_translate_non_json_response_raises_provider_failure():
    provider = WeglotProvider("wg_key", client=_client(lambda request: httpx.Response(200, text="<html>")))

    with pytest.raises(ProviderCallFailure, match="non-JSON"):
        provider.translate("en", "fr", "", build_words(["Hello"]))


def test_translate_timeout_raises_provider_failure():
    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    provider = WeglotProvider("wg_key", client=_client(handler))

    with pytest.raises(ProviderCallFailure, match="timeout"):
        provider.translate("en", "fr", "", build_words(["Hello"]))


def test_translate_connection_error_raises_provider_failure():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    provider = WeglotProvider("wg_key", client=_client(handler))

    with pytest.raises(ProviderCallFailure, match="ConnectError"):
        provider.translate("en", "fr", "", build_words(["Hello"]))


def test_provider_requires_api_key():
    with pytest.raises(ConfigurationMissing):
        WeglotProvider("")


def test_fetch_project_settings_returns_enabled_languages_in_order():
    seen = {}

    def handler(request):
        seen["url"] = str(request.url)
        return httpx.Response(200, json={
            "language_from": "en",
            "languages": [
                {"language_to": "fr", "enabled": True},
                {"language_to": "it", "enabled": False},
                {"language_to": "de", "enabled": True},
                {"language_to": "fr", "enabled": True},
            ],
        })

    settings = fetch_project_settings(
        "abc123", settings_url="https://cdn.example.com/projects-settings", client=_client(handler)
    )

    assert seen["url"] == "https://cdn.example.com/projects-settings/abc123.json"
    assert settings.source_language == "en"
    assert settings.target_languages == ["fr", "de"]


def test_fetch_project_settings_without_languages_returns_empty_targets():
    client = _client(lambda request: httpx.Response(200, json={"language_from": "en"}))
    settings = fetch_project_settings("abc123", client=client)
    assert settings.target_languages == []


def test_fetch_project_settings_without_original_language_raises():
    client = _client(lambda request: httpx.Response(200, json={"languages": []}))
    with pytest.raises(ConfigurationMissing):
        fetch_project_settings("abc123", client=client)


def test_fetch_project_settings_not_found_raises_provider_failure():
    client = _client(lambda request: httpx.Response(404, text="Not Found"))
    with pytest.raises(ProviderCallFailure, match="404"):
        fetch_project_settings("missing", client=client)


def test_get_httpx_timeout_from_number():
    timeout = get_httpx_timeout(30)
    assert timeout.read == 30.0
    assert timeout.connect == 10.0


def test_get_httpx_timeout_defaults_when_unset():
    assert get_httpx_timeout(None).read == 120.0
