from .urls import ws_url, token_url
from .connection import SessionTransport, auth_headers

__all__ = ["SessionTransport", "auth_headers", "token_url", "ws_url"]
