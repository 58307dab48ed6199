from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, NoReturn, Optional

from whatsapp_cloud_api.decode import decode_body
from whatsapp_cloud_api.exceptions import ResponseException
from whatsapp_cloud_api.request import Request

GRAPH_VERSION_HEADER = "facebook-api-version"


@dataclass(frozen=True)
class Response:
    """
    Result of one Graph API exchange.

    headers and decoded_body are read-only views over private copies;
    decoded_body is computed once from body at construction.
    """

    request: Request
    body: str
    http_status_code: Optional[int] = None
    headers: Mapping[str, str] = field(default_factory=dict)
    decoded_body: Mapping[Any, Any] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))
        object.__setattr__(self, "decoded_body", MappingProxyType(decode_body(self.body)))

    def __hash__(self) -> int:
        return hash((self.request, self.body, self.http_status_code))

    @property
    def access_token(self) -> str:
        """Access token used for this exchange."""
        return self.request.access_token

    @property
    def graph_version(self) -> Optional[str]:
        """Graph version reported by the server, if any."""
        return self.headers.get(GRAPH_VERSION_HEADER)

    def is_error(self) -> bool:
        """True if Graph returned an error object."""
        return "error" in self.decoded_body

    def raise_exception(self) -> NoReturn:
        """Raise ResponseException for this response unconditionally."""
        raise ResponseException(self)

    def raise_for_error(self) -> None:
        """Raise ResponseException only when Graph reported an error."""
        if self.is_error():
            self.raise_exception()
