#!/usr/bin/env python3
"""
sample_app.py - Chat-with-your-data sample page.

Posts a system prompt and a user prompt to the Azure OpenAI deployment with the
Azure AI Search index attached, then renders the Markdown answer, the search
intent and the citations as HTML.

Usage:
    python sample_app.py        # listens on SAMPLE_APP_HOST:SAMPLE_APP_PORT
"""
from __future__ import annotations

import html
from typing import List, Optional

import markdown
import uvicorn
from dotenv import load_dotenv
from loguru import logger
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import HTMLResponse
from starlette.routing import Route

load_dotenv()

from clients.chat_client import OnYourDataChatClient  # noqa: E402 – must be after load_dotenv
from config.settings import settings  # noqa: E402
from models.chat import ChatAnswer  # noqa: E402

DEFAULT_SYSTEM_TEXT = "You are a helpful assistant."


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def to_html(text: str) -> str:
    return markdown.markdown(text or "", extensions=["tables", "fenced_code"])


def render_citations(answer: ChatAnswer) -> List[str]:
    return [
        f'<a href="{html.escape(c.url or "", quote=True)}">Citation</a><br />{to_html(c.content)}'
        for c in answer.citations
    ]


def render_page(
    system_text: str = DEFAULT_SYSTEM_TEXT,
    user_text: str = "",
    answer: Optional[ChatAnswer] = None,
) -> str:
    results = ""
    if answer is not None:
        intent = (
            f"<h3>Intent</h3><p>{html.escape(answer.intent)}</p>" if answer.intent else ""
        )
        citations = "".join(f"<div class=\"citation\">{c}</div>" for c in render_citations(answer))
        results = (
            "<h3>System message</h3>"
            f"<p>{html.escape(answer.system_message)}</p>"
            "<h3>User message</h3>"
            f"<p>{html.escape(answer.user_message)}</p>"
            f"<h3>Completion</h3><div class=\"completion\">{to_html(answer.completion)}</div>"
            f"{intent}"
            f"<h3>Citations</h3>{citations}"
        )
    return f"""<!DOCTYPE html>
<html>
<head><meta charset="utf-8"><title>Azure OpenAI on your data</title></head>
<body>
<h1>Azure OpenAI on your data</h1>
<form method="post" action="/">
  <label for="SystemText">System message</label><br />
  <textarea id="SystemText" name="SystemText" rows="3" cols="80">{html.escape(system_text)}</textarea><br />
  <label for="UserText">Your question</label><br />
  <textarea id="UserText" name="UserText" rows="3" cols="80">{html.escape(user_text)}</textarea><br />
  <button type="submit">Send</button>
</form>
{results}
</body>
</html>
"""


# ---------------------------------------------------------------------------
# Starlette app
# ---------------------------------------------------------------------------

async def index(request: Request) -> HTMLResponse:
    return HTMLResponse(render_page())


async def process_input(request: Request) -> HTMLResponse:
    form = await request.form()
    user_text = str(form.get("UserText", ""))
    system_text = str(form.get("SystemText", ""))
    client: OnYourDataChatClient = request.app.state.chat_client
    answer = await client.ask(user_text, system_text)
    return HTMLResponse(render_page(system_text, user_text, answer))


def create_app(chat_client: Optional[OnYourDataChatClient] = None) -> Starlette:
    app = Starlette(routes=[
        Route("/", index,         methods=["GET"]),
        Route("/", process_input, methods=["POST"]),
    ])
    app.state.chat_client = chat_client or OnYourDataChatClient()
    return app


if __name__ == "__main__":
    logger.info(f"Chat sample listening on {settings.sample_app_host}:{settings.sample_app_port}")
    uvicorn.run(create_app(), host=settings.sample_app_host, port=settings.sample_app_port)
