from .path_request import CONTENT_ENCODING, CONTENT_TYPE, PathRequest
from .path_response import PathFailure, PathFound, PathResponse

__all__ = [
    "CONTENT_ENCODING",
    "CONTENT_TYPE",
    "PathRequest",
    "PathResponse",
    "PathFound",
    "PathFailure",
]
