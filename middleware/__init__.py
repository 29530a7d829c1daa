"""
Zero Waste Chef Middleware
Request logging and response hardening
"""

from .logging import LoggingMiddleware
from .security import SecurityMiddleware

__all__ = ["LoggingMiddleware", "SecurityMiddleware"]
