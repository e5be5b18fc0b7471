"""Tests for settings resolution."""

import pytest

from natural_language_classifier import DEFAULT_URL, ClassifierSettings, NaturalLanguageClassifier

ENV_VARS = (
    "NATURAL_LANGUAGE_CLASSIFIER_URL",
    "NATURAL_LANGUAGE_CLASSIFIER_USERNAME",
    "NATURAL_LANGUAGE_CLASSIFIER_PASSWORD",
    "NATURAL_LANGUAGE_CLASSIFIER_TIMEOUT",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # keep a stray .env in the working directory out of the picture
    monkeypatch.chdir(tmp_path)


class TestClassifierSettings:

    def test_defaults(self):
        settings = ClassifierSettings()
        assert settings.url == DEFAULT_URL
        assert settings.username is None
        assert settings.password is None
        assert settings.timeout == 60.0

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("NATURAL_LANGUAGE_CLASSIFIER_URL", "https://example.test/api")
        monkeypatch.setenv("NATURAL_LANGUAGE_CLASSIFIER_USERNAME", "env-user")
        monkeypatch.setenv("NATURAL_LANGUAGE_CLASSIFIER_PASSWORD", "env-pass")
        monkeypatch.setenv("NATURAL_LANGUAGE_CLASSIFIER_TIMEOUT", "5")

        settings = ClassifierSettings()
        assert settings.url == "https://example.test/api"
        assert settings.username == "env-user"
        assert settings.password == "env-pass"
        assert settings.timeout == 5.0

    def test_reads_dotenv_file(self, tmp_path):
        (tmp_path / ".env").write_text("NATURAL_LANGUAGE_CLASSIFIER_USERNAME=file-user\n")
        assert ClassifierSettings().username == "file-user"

    def test_empty_url_falls_back_to_default(self, monkeypatch):
        monkeypatch.setenv("NATURAL_LANGUAGE_CLASSIFIER_URL", "")
        assert ClassifierSettings().url == DEFAULT_URL


class TestClientConfiguration:

    def test_default_endpoint(self):
        with NaturalLanguageClassifier() as client:
            assert client.endpoint == DEFAULT_URL
            assert str(client._client.base_url) == DEFAULT_URL + "/"
            assert client._client.auth is None

    def test_empty_url_argument_uses_default(self):
        with NaturalLanguageClassifier(url="  ") as client:
            assert client.endpoint == DEFAULT_URL

    def test_arguments_override_settings(self):
        settings = ClassifierSettings(url="https://settings.test/api", username="s", password="s")
        with NaturalLanguageClassifier("arg-user", "arg-pass", "https://arg.test/api", settings=settings) as client:
            assert client.endpoint == "https://arg.test/api"
            assert client._client.auth is not None

    def test_credentials_from_environment(self, monkeypatch):
        monkeypatch.setenv("NATURAL_LANGUAGE_CLASSIFIER_USERNAME", "env-user")
        monkeypatch.setenv("NATURAL_LANGUAGE_CLASSIFIER_PASSWORD", "env-pass")
        with NaturalLanguageClassifier() as client:
            assert client._client.auth is not None

    def test_default_headers_include_user_agent(self):
        with NaturalLanguageClassifier(default_headers={"X-Custom": "1"}) as client:
            headers = client.default_headers
        assert headers["X-Custom"] == "1"
        assert headers["User-Agent"].startswith("natural-language-classifier-python/")

    def test_repr_shows_endpoint(self):
        with NaturalLanguageClassifier(url="https://example.test/api") as client:
            assert repr(client) == "NaturalLanguageClassifier(endpoint='https://example.test/api')"
