import uuid
from itertools import count
from typing import Optional

import pytest

from rttbench.components import ClientIdentity
from rttbench.components.config_parser import Parameters
from rttbench.components.messages import PathFailure, PathFound, PathResponse


class ScriptedClient:
    """
    Stands for the broker client: records published requests and hands out the
    scripted replies in order.
    """

    def __init__(self, replies: list[PathResponse | bytes]):
        self.replies = [r.bytes() if isinstance(r, PathResponse) else r for r in replies]
        self.published = list[bytes]()
        self.received = 0

    def publish(self, body: bytes):
        self.published.append(body)

    def receive(self, timeout: Optional[float] = None) -> bytes:
        assert self.received < len(self.published), "receive called without a pending request"
        reply = self.replies[self.received]
        self.received += 1
        return reply


class SteppedClock:
    """
    Fake monotonic clock. Every read advances by `step` seconds, unless a list of
    values is given.
    """

    def __init__(self, values: Optional[list[float]] = None, step: float = 0.001):
        self.values = iter(values) if values is not None else (i * step for i in count())

    def __call__(self) -> float:
        return next(self.values)


@pytest.fixture
def identity() -> ClientIdentity:
    return ClientIdentity(uuid.UUID("3f2b8c1e-9d4a-4c7e-8b1f-2a6d5e4c3b21"))


@pytest.fixture
def params() -> Parameters:
    return Parameters.load()


@pytest.fixture
def memory_params(params: Parameters) -> Parameters:
    """
    Parameters pointing at kombu's in-memory transport, with entity names unique to
    the test since the transport state is shared by the whole process.
    """
    suffix = uuid.uuid4().hex[:8]

    params.broker.url = "memory://"
    params.broker.poll_interval = 0.01
    params.topology.exchange = f"responses-{suffix}"
    params.topology.requests_queue = f"requests-{suffix}"

    return params


@pytest.fixture
def path_found() -> PathFound:
    return PathFound(("A", "B", "E"))


@pytest.fixture
def path_failure() -> PathFailure:
    return PathFailure("no path between A and E")


@pytest.fixture
def scripted_client() -> type[ScriptedClient]:
    return ScriptedClient


@pytest.fixture
def stepped_clock() -> type[SteppedClock]:
    return SteppedClock
