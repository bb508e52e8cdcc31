"""
Pytest configuration and shared fixtures for vision-query tests.
"""

import pytest

from vision_query import ChatMessage, Query, image_block, text_block
from vision_query.utils import set_debug


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep VISION_QUERY_* settings and debug state from leaking between tests."""
    import os

    for key in list(os.environ):
        if key.startswith("VISION_QUERY_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    set_debug(None)
    yield
    set_debug(None)


@pytest.fixture
def user_text_message():
    return ChatMessage(role="user", content="Describe this picture.")


@pytest.fixture
def user_vision_message():
    return ChatMessage(
        role="user",
        content=[
            text_block("What is in this image?"),
            image_block("https://example.com/cat.png"),
        ],
    )


@pytest.fixture
def sample_query(user_text_message, user_vision_message):
    return Query(
        model="gpt-4-vision-preview",
        messages=[
            ChatMessage(role="system", content="You are a helpful assistant."),
            user_text_message,
            user_vision_message,
        ],
        max_tokens=300,
    )
