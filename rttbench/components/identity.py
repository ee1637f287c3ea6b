import uuid
from dataclasses import dataclass, field


@dataclass(frozen=True)
class ClientIdentity:
    """
    Correlation identity of this process. Created once at startup and handed to
    every component that needs it, it tags the published requests and is the
    routing key of the private response queue.
    """

    value: uuid.UUID = field(default_factory=uuid.uuid4)

    @property
    def routing_key(self) -> str:
        return str(self.value)

    def __str__(self):
        return self.routing_key
