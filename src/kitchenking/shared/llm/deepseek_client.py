from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import httpx

from kitchenking.shared.config.settings import settings
from kitchenking.shared.llm.errors import HttpError, TransportFailure, UnexpectedResponseShape
from kitchenking.shared.logging.logger import mask_key

log = logging.getLogger("deepseek")


def _chat_url(base_url: Optional[str] = None) -> str:
    return f"{(base_url or settings.DEEPSEEK_BASE_URL).rstrip('/')}/chat/completions"


def _headers(api_key: str) -> Dict[str, str]:
    return {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json",
    }


def _extract_content(data: Any) -> str:
    try:
        content = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError) as e:
        raise UnexpectedResponseShape(f"missing choices[0].message.content: {e!r}") from e
    if not isinstance(content, str):
        raise UnexpectedResponseShape(f"content is {type(content).__name__}, expected str")
    return content


async def complete_chat(
    messages: List[Dict[str, str]],
    *,
    api_key: str,
    model: Optional[str] = None,
    temperature: Optional[float] = None,
    max_tokens: Optional[int] = None,
    request_timeout: Optional[float] = None,
    base_url: Optional[str] = None,
    http_client: Optional[httpx.AsyncClient] = None,
) -> str:
    """
    Send one non-streaming chat completion and return the assistant text.

    Exactly one request is made; failures are raised as TransportFailure,
    HttpError or UnexpectedResponseShape and never retried here.
    """
    payload = {
        "model": (model or settings.CHAT_MODEL),
        "messages": messages,
        "temperature": temperature if temperature is not None else settings.TEMPERATURE,
        "max_tokens": max_tokens if max_tokens is not None else settings.MAX_TOKENS,
    }
    timeout = httpx.Timeout(request_timeout or settings.LLM_REQUEST_TIMEOUT)
    url = _chat_url(base_url)
    log.debug("POST %s model=%s key=%s", url, payload["model"], mask_key(api_key))

    try:
        if http_client is not None:
            resp = await http_client.post(url, headers=_headers(api_key), json=payload, timeout=timeout)
        else:
            async with httpx.AsyncClient(timeout=timeout) as client:
                resp = await client.post(url, headers=_headers(api_key), json=payload)
    except httpx.DecodingError as e:
        log.warning("undecodable body from %s: %r", url, e)
        raise UnexpectedResponseShape(f"body could not be decoded: {e}") from e
    except httpx.RequestError as e:
        log.warning("transport failure calling %s: %r", url, e)
        raise TransportFailure(type(e).__name__) from e

    if not resp.is_success:
        body = resp.text[:500]
        log.warning("HTTP %s from %s: %s", resp.status_code, url, body)
        raise HttpError(resp.status_code, body)

    try:
        data = resp.json()
    except ValueError as e:
        raise UnexpectedResponseShape(f"body is not JSON: {e}") from e
    return _extract_content(data)
