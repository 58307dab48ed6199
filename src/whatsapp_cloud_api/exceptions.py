"""Errors raised for Graph API responses."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional

if TYPE_CHECKING:
    from whatsapp_cloud_api.response import Response

DEFAULT_MESSAGE = "Unknown error from Graph."
DEFAULT_CODE = -1


class ResponseException(Exception):
    """
    Graph reported an error for a request.

    Attributes:
        response: The response that carried the error.
        message: Graph's error message.
        code: Graph's error code.
        subcode: Graph's error_subcode, if present.
        error_type: Graph's error type (e.g. OAuthException), if present.
        fbtrace_id: Trace id to quote to Meta support, if present.
    """

    def __init__(self, response: "Response"):
        self.response = response

        error = response.decoded_body.get("error")
        if not isinstance(error, dict):
            error = {}

        self.message: str = str(error.get("message") or DEFAULT_MESSAGE)
        self.code: int = error.get("code", DEFAULT_CODE)
        self.subcode: Optional[int] = error.get("error_subcode")
        self.error_type: Optional[str] = error.get("type")
        self.fbtrace_id: Optional[str] = error.get("fbtrace_id")

        super().__init__(self.message)

    @property
    def response_data(self) -> Dict[Any, Any]:
        return self.response.decoded_body

    @property
    def raw_response(self) -> str:
        return self.response.body

    @property
    def http_status_code(self) -> Optional[int]:
        return self.response.http_status_code

    def __str__(self) -> str:
        parts = [self.message, f"code={self.code}"]
        if self.subcode is not None:
            parts.append(f"subcode={self.subcode}")
        if self.fbtrace_id:
            parts.append(f"fbtrace={self.fbtrace_id}")
        return " | ".join(parts)
