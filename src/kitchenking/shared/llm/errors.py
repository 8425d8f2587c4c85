"""
Failure modes of a single chat-completion request.

Every error carries a short human-readable description (``str(err)``) that is
safe to show next to the chef that hit it.
"""
from __future__ import annotations


class RequestError(Exception):
    """Base class for everything a single recipe request can fail with."""


class TransportFailure(RequestError):
    """No response was obtained (connection refused, DNS, timeout, ...)."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"网络请求失败: {reason}")
        self.reason = reason


class HttpError(RequestError):
    def __init__(self, status_code: int, body: str = "") -> None:
        super().__init__(f"API错误，状态码：{status_code}")
        self.status_code = status_code
        self.body = body


class UnexpectedResponseShape(RequestError):
    """2xx response whose envelope lacks choices[0].message.content."""

    def __init__(self, detail: str = "") -> None:
        super().__init__("无效的响应格式")
        self.detail = detail
