from types import SimpleNamespace

import openai
import pytest

from config import Settings
from generation import (
    KAOMOJI_PROMPT,
    GenerationError,
    GenerationFailure,
    GenerationSuccess,
    KaomojiGenerator,
)


class FakeCompletions:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return self.response


def fake_client(texts=None, error=None):
    choices = [SimpleNamespace(text=t) for t in (texts or [])]
    completions = FakeCompletions(SimpleNamespace(choices=choices), error)
    return SimpleNamespace(completions=completions)


class TestComplete:
    def test_returns_first_choice(self):
        client = fake_client(["\n\n(^▽^)", "(T_T)"])
        gen = KaomojiGenerator(client=client)
        assert gen.complete("prompt") == "(^▽^)"

    def test_sends_fixed_sampling_parameters(self):
        client = fake_client(["(^_^)"])
        gen = KaomojiGenerator(model="some-model", temperature=0.8, max_tokens=100, client=client)
        gen.complete("hello")
        assert client.completions.calls == [
            {"model": "some-model", "prompt": "hello", "temperature": 0.8, "max_tokens": 100}
        ]

    def test_no_choices(self):
        gen = KaomojiGenerator(client=fake_client([]))
        with pytest.raises(GenerationError, match="No kaomoji generated"):
            gen.complete("prompt")

    def test_service_error(self):
        gen = KaomojiGenerator(client=fake_client(error=openai.OpenAIError("quota exceeded")))
        with pytest.raises(GenerationError, match="quota exceeded"):
            gen.complete("prompt")

    def test_choice_without_text(self):
        response = SimpleNamespace(choices=[SimpleNamespace()])
        client = SimpleNamespace(completions=FakeCompletions(response))
        with pytest.raises(GenerationError):
            KaomojiGenerator(client=client).complete("prompt")

    def test_whitespace_only_text(self):
        gen = KaomojiGenerator(client=fake_client(["\n\n  "]))
        with pytest.raises(GenerationError, match="empty completion"):
            gen.complete("prompt")


class TestGenerate:
    def test_success(self):
        client = fake_client(["(^▽^)"])
        result = KaomojiGenerator(client=client).generate("I am happy")
        assert result == GenerationSuccess("(^▽^)")
        assert client.completions.calls[0]["prompt"] == KAOMOJI_PROMPT.format(word="I am happy")
        assert '"I am happy"' in client.completions.calls[0]["prompt"]

    def test_zero_candidates_is_failure(self):
        result = KaomojiGenerator(client=fake_client([])).generate("sad")
        assert isinstance(result, GenerationFailure)
        assert "No kaomoji generated" in result.reason

    def test_empty_completion_is_failure(self):
        result = KaomojiGenerator(client=fake_client(["\n"])).generate("sad")
        assert isinstance(result, GenerationFailure)

    def test_network_error_is_failure(self):
        client = fake_client(error=openai.OpenAIError("connection reset"))
        result = KaomojiGenerator(client=client).generate("sad")
        assert isinstance(result, GenerationFailure)
        assert "connection reset" in result.reason

    def test_missing_api_key_is_failure(self, monkeypatch):
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        result = KaomojiGenerator(api_key="").generate("sad")
        assert isinstance(result, GenerationFailure)


def test_from_settings(monkeypatch):
    monkeypatch.setenv("OPENAI_MODEL", "another-model")
    monkeypatch.setenv("OPENAI_TEMPERATURE", "0.5")
    monkeypatch.setenv("OPENAI_MAX_TOKENS", "42")
    gen = KaomojiGenerator.from_settings(Settings())
    assert gen.model == "another-model"
    assert gen.temperature == 0.5
    assert gen.max_tokens == 42
