from dataclasses import dataclass
from typing import Optional

from .base_classes import ExplicitParams


@dataclass(init=False)
class RequestParams(ExplicitParams):
    origin: str
    destination: str


@dataclass(init=False)
class BenchmarkParams(ExplicitParams):
    samples: int
    response_timeout: float
    max_retries: int
    request: RequestParams

    @property
    def timeout(self) -> Optional[float]:
        """Response timeout in seconds, None to wait forever."""
        return self.response_timeout if self.response_timeout > 0 else None

    @property
    def retry_limit(self) -> Optional[int]:
        """Consecutive domain errors tolerated for one cycle, None for no limit."""
        return self.max_retries if self.max_retries > 0 else None


@dataclass(init=False)
class MetricsParams(ExplicitParams):
    port: int
