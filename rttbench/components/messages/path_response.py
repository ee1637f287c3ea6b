import json
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from ..errors import DecodeError
from .path_request import CONTENT_ENCODING


class PathResponse(ABC):
    """
    Reply of the path service. On the wire the error travels next to the path in a
    single object; once parsed a reply is either a `PathFound` or a `PathFailure`.
    """

    ok: bool

    @abstractmethod
    def as_dict(self) -> dict:
        pass

    def bytes(self) -> bytes:
        return json.dumps(self.as_dict(), separators=(",", ":")).encode(CONTENT_ENCODING)

    @classmethod
    def parse(cls, data: "bytes | str") -> "PathResponse":
        try:
            if isinstance(data, bytes):
                data = data.decode(CONTENT_ENCODING)
            content = json.loads(data)
        except (UnicodeDecodeError, ValueError) as err:
            raise DecodeError(f"Response is not valid JSON: {err}") from err

        if not isinstance(content, dict):
            raise DecodeError(f"Response must be a JSON object, got {type(content).__name__}")

        error = content.get("error")
        if error is not None:
            return PathFailure(cls._reason(error))

        path = content.get("path")
        if path is None:
            return PathFound()

        if not isinstance(path, list) or not all(isinstance(node, str) for node in path):
            raise DecodeError(f"Response path must be a list of strings, got `{path}`")

        return PathFound(tuple(path))

    @staticmethod
    def _reason(error: Any) -> str:
        if isinstance(error, str):
            return error
        return json.dumps(error, sort_keys=True)


@dataclass(frozen=True)
class PathFound(PathResponse):
    path: tuple[str, ...] = field(default_factory=tuple)

    ok = True

    def as_dict(self) -> dict:
        return {"path": list(self.path), "error": None}


@dataclass(frozen=True)
class PathFailure(PathResponse):
    reason: str

    ok = False

    def as_dict(self) -> dict:
        return {"path": None, "error": self.reason}
