from __future__ import annotations

from typing import Optional

import requests

from whatsapp_cloud_api.config import ClientConfig
from whatsapp_cloud_api.request import Request
from whatsapp_cloud_api.response import Response
from whatsapp_cloud_api.utils.logging import get_logger


class GraphApiClient:
    """Graph API client using the requests library."""

    def __init__(self, config: ClientConfig | None = None, session: Optional[requests.Session] = None):
        self.config = config or ClientConfig()
        self.session = session or requests.Session()
        self.log = get_logger("whatsapp_cloud_api.http")

    def send(self, request: Request) -> Response:
        """Send a request and wrap the result. Transport errors propagate."""
        url = request.url(self.config.base_url, self.config.graph_version)
        self.log.debug("%s %s", request.method, url)

        r = self.session.request(
            method=request.method,
            url=url,
            headers=request.headers(),
            params=request.params or None,
            json=request.body,
            timeout=request.timeout_s or self.config.timeout_s,
        )

        # Graph version lookup relies on lower-case header names
        headers = {k.lower(): v for k, v in r.headers.items()}

        response = Response(request=request, body=r.text, http_status_code=r.status_code, headers=headers)
        if response.is_error():
            self.log.warning("Graph error for %s (status=%s)", url, response.http_status_code)

        return response
