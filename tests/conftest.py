import pytest

from weglot_i18n.provider.base import BatchTranslation, TranslationProvider


class FakeProvider(TranslationProvider):
    """Records every call and prefixes each word with the target language."""

    def __init__(self, fail_for=None):
        self.calls = []
        self.fail_for = fail_for or {}

    def translate(self, source_language, target_language, request_url, words):
        self.calls.append({
            "source": source_language,
            "target": target_language,
            "request_url": request_url,
            "words": words,
        })
        if target_language in self.fail_for:
            raise self.fail_for[target_language]
        texts = [word["w"] for word in words]
        return BatchTranslation(
            requested=texts,
            translated=[f"[{target_language}] {text}" for text in texts],
        )


@pytest.fixture
def fake_provider():
    return FakeProvider()


@pytest.fixture
def locale_tree():
    return {
        "greeting": "Hello {{name}}",
        "nav": {
            "home": "Home",
            "about": "About",
        },
        "steps": ["Start", {"label": "Home"}, 3],
        "enabled": True,
        "empty": "",
    }
