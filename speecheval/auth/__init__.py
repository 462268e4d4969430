from .signature import sign
from .token import acquire_token

__all__ = ["acquire_token", "sign"]
