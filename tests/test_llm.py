from types import SimpleNamespace

import pytest

from healthbridge.assist.llm import MOCK_DIAGNOSIS, MOCK_RECOMMENDATIONS, LLMClient
from healthbridge.assist.prompt import build_diagnosis_prompt, build_recommendation_prompt
from healthbridge.errors import MissingAPIKeyError


class StubCompletions:
    def __init__(self, content):
        self.content = content
        self.calls = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        choices = [] if self.content is ... else [SimpleNamespace(message=SimpleNamespace(content=self.content))]
        return SimpleNamespace(choices=choices)


def _client_with(content):
    client = LLMClient(api_key="test-key", model="gemini-test", mock=False)
    completions = StubCompletions(content)
    client._client = SimpleNamespace(chat=SimpleNamespace(completions=completions))
    return client, completions


async def test_generate_text_sends_prompt_to_model():
    client, completions = _client_with("answer")

    assert await client.generate_text("hello") == "answer"
    assert completions.calls == [{"model": "gemini-test", "messages": [{"role": "user", "content": "hello"}]}]


@pytest.mark.parametrize("content", [None, "", ...])
async def test_generate_text_empty_payload(content):
    client, _ = _client_with(content)
    assert await client.generate_text("hello") is None


async def test_missing_api_key_raises():
    client = LLMClient(api_key="", mock=False)

    with pytest.raises(MissingAPIKeyError, match="API_KEY"):
        await client.generate_text("hello")


async def test_mock_mode_needs_no_key():
    client = LLMClient(api_key="", mock=True)

    assert await client.generate_text(build_diagnosis_prompt("fever")) == MOCK_DIAGNOSIS
    assert await client.generate_text(build_recommendation_prompt("fever")) == MOCK_RECOMMENDATIONS


async def test_close_without_client_is_noop():
    await LLMClient(api_key="", mock=True).close()
