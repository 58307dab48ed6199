from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Request:
    """A single call to a Graph API node."""

    access_token: str
    node_path: str
    method: str = "POST"
    body: Optional[Dict[str, Any]] = None
    params: Dict[str, Any] = field(default_factory=dict)
    timeout_s: Optional[int] = None

    def __hash__(self) -> int:
        return hash((self.access_token, self.node_path, self.method, self.timeout_s))

    def headers(self) -> Dict[str, str]:
        """Headers sent with this request."""
        return {
            "Authorization": f"Bearer {self.access_token}",
            "Content-Type": "application/json",
        }

    def url(self, base_url: str, graph_version: str) -> str:
        """Absolute URL of the node for the given Graph version."""
        return f"{base_url.rstrip('/')}/{graph_version}/{self.node_path.lstrip('/')}"
