from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .config import ClientConfig
from .query import Query
from .utils import log


@dataclass(frozen=True)
class PreparedRequest:
    """
    Everything a transport needs to send a Query.

    When `stream` is true the transport is expected to deliver a sequence of
    incremental chunks instead of a single response body.
    """
    url: str
    body: bytes
    stream: bool = False
    headers: dict[str, str] = field(default_factory=dict)
    timeout_seconds: Optional[int] = None


def build_headers(config: ClientConfig, *, stream: bool = False) -> dict[str, str]:
    headers = {"Content-Type": "application/json"}
    if stream:
        headers["Accept"] = "text/event-stream"
    if config.token:
        headers["Authorization"] = f"Bearer {config.token}"
    if config.organization:
        headers["OpenAI-Organization"] = config.organization
    return headers


def prepare_request(query: Query, config: ClientConfig | None = None) -> PreparedRequest:
    cfg = config or ClientConfig.load()
    body = query.to_json().encode("utf-8")

    log("[vision-query] prepared request")
    log("  url:", cfg.chat_url)
    log("  model:", query.model, "messages:", len(query.messages), "stream:", query.stream)
    log("  body bytes:", len(body))

    return PreparedRequest(
        url=cfg.chat_url,
        body=body,
        stream=query.stream,
        headers=build_headers(cfg, stream=query.stream),
        timeout_seconds=cfg.timeout_seconds,
    )
