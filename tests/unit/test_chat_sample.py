"""
Unit tests - chat-with-your-data sample (OpenAI client is stubbed)
"""

import asyncio
from types import SimpleNamespace

import pytest
from starlette.testclient import TestClient

from clients.chat_client import MARKDOWN_INSTRUCTION, OnYourDataChatClient
from config.settings import settings
from models.chat import ChatAnswer, Citation


class StubCompletions:
    def __init__(self, content="**Hello**", context=None):
        self.content = content
        self.context = context
        self.requests = []

    async def create(self, **kwargs):
        self.requests.append(kwargs)
        message = SimpleNamespace(content=self.content, context=self.context)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def stub_llm(completions):
    return SimpleNamespace(chat=SimpleNamespace(completions=completions))


@pytest.fixture
def configured(monkeypatch):
    monkeypatch.setattr(settings, "azure_openai_deployment", "gpt-4o")
    monkeypatch.setattr(settings, "azure_search_endpoint", "https://search.example.net")
    monkeypatch.setattr(settings, "azure_search_key", "search-key")
    monkeypatch.setattr(settings, "azure_search_index", "docs")


class TestOnYourDataChatClient:
    def test_request_carries_search_data_source(self, configured):
        completions = StubCompletions()
        client = OnYourDataChatClient(llm=stub_llm(completions))

        asyncio.run(client.ask("What is in the docs?", "Be brief."))

        request = completions.requests[0]
        assert request["model"] == "gpt-4o"
        assert request["messages"][0] == {
            "role": "system",
            "content": "Be brief." + MARKDOWN_INSTRUCTION,
        }
        assert request["messages"][1]["content"] == "What is in the docs?"
        source = request["extra_body"]["data_sources"][0]
        assert source["type"] == "azure_search"
        assert source["parameters"]["index_name"] == "docs"
        assert source["parameters"]["authentication"] == {"type": "api_key", "key": "search-key"}

    def test_intent_and_citations_are_read_from_context(self, configured):
        context = {
            "intent": '["docs contents"]',
            "citations": [
                {"content": "Chunk *one*", "url": "https://docs/1", "title": None},
                {"content": "Chunk two", "url": "https://docs/2", "chunk_id": "0"},
            ],
        }
        client = OnYourDataChatClient(llm=stub_llm(StubCompletions(context=context)))

        answer = asyncio.run(client.ask("q", "s"))

        assert answer.completion == "**Hello**"
        assert answer.intent == '["docs contents"]'
        assert [c.url for c in answer.citations] == ["https://docs/1", "https://docs/2"]

    def test_missing_context(self, configured):
        client = OnYourDataChatClient(llm=stub_llm(StubCompletions(context=None)))

        answer = asyncio.run(client.ask("q", "s"))

        assert answer.intent is None
        assert answer.citations == []

    def test_placeholders_when_unconfigured(self, monkeypatch):
        monkeypatch.setattr(settings, "azure_openai_api_key", "")
        monkeypatch.setattr(settings, "azure_search_index", "")
        client = OnYourDataChatClient(llm=stub_llm(StubCompletions()))

        assert client.api_key == "KEY NOT SET"
        assert client.search_index == "SEARCH INDEX NOT SET"


class TestSamplePage:
    def test_get_shows_form(self, configured):
        from sample_app import create_app

        app = create_app(OnYourDataChatClient(llm=stub_llm(StubCompletions())))
        response = TestClient(app).get("/")

        assert response.status_code == 200
        assert 'name="UserText"' in response.text
        assert "Completion" not in response.text

    def test_post_renders_markdown_and_citations(self, configured):
        from sample_app import create_app

        context = {"intent": "find docs", "citations": [{"content": "A *cite*", "url": "https://docs/1"}]}
        app = create_app(OnYourDataChatClient(llm=stub_llm(StubCompletions(context=context))))

        response = TestClient(app).post("/", data={"UserText": "hi", "SystemText": "be nice"})

        assert response.status_code == 200
        assert "<strong>Hello</strong>" in response.text
        assert "find docs" in response.text
        assert '<a href="https://docs/1">Citation</a><br /><p>A <em>cite</em></p>' in response.text

    def test_render_citations(self):
        from sample_app import render_citations

        answer = ChatAnswer(
            system_message="s",
            user_message="u",
            citations=[Citation(content="text", url="https://x/?a=1&b=2")],
        )
        assert render_citations(answer) == [
            '<a href="https://x/?a=1&amp;b=2">Citation</a><br /><p>text</p>'
        ]
