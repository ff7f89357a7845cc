"""
Request and response models.
"""
from .request_options import RequestOptions
from .request import Request, generate_correlation_id
from .response import Response

__all__ = [
    "RequestOptions",
    "Request",
    "Response",
    "generate_correlation_id",
]
