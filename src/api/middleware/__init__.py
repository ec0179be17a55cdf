from .rate_limit import RateLimitMiddleware, RateLimitRule
from .request_logging import RequestLoggingMiddleware

__all__ = ["RateLimitMiddleware", "RateLimitRule", "RequestLoggingMiddleware"]
