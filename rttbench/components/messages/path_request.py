import json
import uuid
from dataclasses import dataclass

from ..errors import DecodeError

CONTENT_TYPE = "application/json"
CONTENT_ENCODING = "utf-8"


@dataclass(frozen=True)
class PathRequest:
    """
    Shortest-path request sent to the shared requests queue. The `client_uuid` field
    tells the responder which routing key to answer on.
    """

    params = {"origin": "ori", "destination": "dest", "client_uuid": "client_uuid"}

    origin: str
    destination: str
    client_uuid: uuid.UUID

    def as_dict(self) -> dict:
        return {
            "ori": self.origin,
            "dest": self.destination,
            "client_uuid": str(self.client_uuid),
        }

    def bytes(self) -> bytes:
        return json.dumps(self.as_dict(), separators=(",", ":")).encode(CONTENT_ENCODING)

    @classmethod
    def parse(cls, data: "bytes | str") -> "PathRequest":
        try:
            if isinstance(data, bytes):
                data = data.decode(CONTENT_ENCODING)
            content = json.loads(data)
        except (UnicodeDecodeError, ValueError) as err:
            raise DecodeError(f"Request is not valid JSON: {err}") from err

        if not isinstance(content, dict):
            raise DecodeError(f"Request must be a JSON object, got {type(content).__name__}")

        missing = [key for key in cls.params.values() if key not in content]
        if missing:
            raise DecodeError(f"Request is missing fields {missing}")

        try:
            client_uuid = uuid.UUID(str(content["client_uuid"]))
        except ValueError as err:
            raise DecodeError(f"Invalid client_uuid `{content['client_uuid']}`") from err

        return cls(str(content["ori"]), str(content["dest"]), client_uuid)
