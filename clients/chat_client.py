"""Azure OpenAI chat client grounded on an Azure AI Search index."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import httpx
from azure.identity import DefaultAzureCredential, get_bearer_token_provider
from loguru import logger
from openai import AsyncAzureOpenAI

from config.settings import settings
from models.chat import ChatAnswer, Citation

MARKDOWN_INSTRUCTION = (
    " You ALWAYS return Markdown (MD) because all your results would be rendered in a browser."
)


def _or_placeholder(value: str, placeholder: str) -> str:
    return value or placeholder


class OnYourDataChatClient:
    """
    Sends one system + user prompt pair to an Azure OpenAI deployment with an
    `azure_search` data source attached, and returns the answer together with
    the search intent and citations reported in the message context.
    """

    def __init__(self, llm: Optional[AsyncAzureOpenAI] = None) -> None:
        self.endpoint = _or_placeholder(settings.azure_openai_endpoint, "ENDPOINT NOT SET")
        self.api_key = _or_placeholder(settings.azure_openai_api_key, "KEY NOT SET")
        self.deployment = _or_placeholder(settings.azure_openai_deployment, "DEPLOYMENT NOT SET")
        self.search_endpoint = _or_placeholder(
            settings.azure_search_endpoint, "SEARCH ENDPOINT NOT SET"
        )
        self.search_key = _or_placeholder(settings.azure_search_key, "SEARCH KEY NOT SET")
        self.search_index = _or_placeholder(settings.azure_search_index, "SEARCH INDEX NOT SET")
        self._llm = llm

    def _client(self) -> AsyncAzureOpenAI:
        if self._llm is None:
            client_kwargs: dict = {
                "azure_endpoint": self.endpoint,
                "api_version": settings.azure_openai_api_version,
                "http_client": httpx.AsyncClient(timeout=httpx.Timeout(60.0, connect=10.0)),
            }
            if settings.azure_openai_api_key:
                client_kwargs["api_key"] = settings.azure_openai_api_key
            else:
                client_kwargs["azure_ad_token_provider"] = get_bearer_token_provider(
                    DefaultAzureCredential(), "https://cognitiveservices.azure.com/.default"
                )
            self._llm = AsyncAzureOpenAI(**client_kwargs)
        return self._llm

    def _data_source(self) -> Dict[str, Any]:
        return {
            "type": "azure_search",
            "parameters": {
                "endpoint": self.search_endpoint,
                "index_name": self.search_index,
                "authentication": {"type": "api_key", "key": self.search_key},
            },
        }

    async def ask(self, user_text: str, system_text: str) -> ChatAnswer:
        system_prompt = (system_text or "") + MARKDOWN_INSTRUCTION
        logger.info(f"OnYourDataChatClient: querying deployment '{self.deployment}'")

        response = await self._client().chat.completions.create(
            model=self.deployment,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_text},
            ],
            extra_body={"data_sources": [self._data_source()]},
        )
        message = response.choices[0].message
        context = self._message_context(message)

        citations: List[Citation] = [
            Citation(**{
                k: v for k, v in raw.items() if k in Citation.model_fields and v is not None
            })
            for raw in context.get("citations") or []
        ]
        logger.success(f"OnYourDataChatClient: answer with {len(citations)} citations.")
        return ChatAnswer(
            system_message=system_prompt,
            user_message=user_text,
            completion=message.content or "",
            intent=context.get("intent"),
            citations=citations,
        )

    @staticmethod
    def _message_context(message: Any) -> Dict[str, Any]:
        """The `context` extension Azure adds to the assistant message, if any."""
        extra = getattr(message, "model_extra", None) or {}
        context = extra.get("context") or getattr(message, "context", None)
        return context if isinstance(context, dict) else {}
