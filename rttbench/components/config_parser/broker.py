from dataclasses import dataclass

from .base_classes import ExplicitParams


@dataclass(init=False)
class BrokerParams(ExplicitParams):
    url: str
    connect_timeout: float
    connect_retries: int
    poll_interval: float


@dataclass(init=False)
class TopologyParams(ExplicitParams):
    exchange: str
    requests_queue: str
