"""
Middleware layer initialization.
Middleware handles cross-cutting concerns like request logging.
"""

from .request_logging import log_requests

__all__ = ["log_requests"]
