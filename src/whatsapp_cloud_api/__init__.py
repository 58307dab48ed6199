from whatsapp_cloud_api.config import ClientConfig, load_config
from whatsapp_cloud_api.exceptions import ResponseException
from whatsapp_cloud_api.request import Request
from whatsapp_cloud_api.response import Response

__all__ = [
    "ClientConfig",
    "Request",
    "Response",
    "ResponseException",
    "load_config",
]
