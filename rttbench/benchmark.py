import logging
import time
from typing import Callable, Optional, Protocol

from .components import metrics
from .components.config_parser import BenchmarkParams
from .components.errors import RetryLimitExceeded
from .components.identity import ClientIdentity
from .components.logs import configure_logging
from .components.messages import PathFailure, PathRequest, PathResponse
from .components.statistics import Statistics, Summary

configure_logging()
logger = logging.getLogger(__name__)


class RequestChannel(Protocol):
    def publish(self, body: bytes): ...

    def receive(self, timeout: Optional[float] = None) -> bytes: ...


class Benchmark:
    def __init__(
        self,
        client: RequestChannel,
        identity: ClientIdentity,
        params: BenchmarkParams,
        clock: Callable[[], float] = time.perf_counter,
    ):
        """
        Create a benchmark sending requests through `client`, one at a time.
        :param client: object able to publish a request and wait for its reply.
        :param identity: correlation identity of this process.
        :param params: benchmark parameters (sample count, timeout, retry cap).
        :param clock: monotonic clock in seconds.
        """
        self.client = client
        self.identity = identity
        self.params = params
        self.clock = clock

        self.statistics = Statistics()
        self.published = 0
        self.domain_errors = 0

    def request(self) -> bytes:
        return PathRequest(
            self.params.request.origin,
            self.params.request.destination,
            self.identity.value,
        ).bytes()

    def cycle(self) -> Optional[float]:
        """
        Send one request and wait for its reply.
        :returns: the round-trip time in seconds, or None if the reply carries an error.
        """
        body = self.request()

        start = self.clock()
        self.client.publish(body)
        self.published += 1
        metrics.REQUESTS_PUBLISHED.inc()

        response = PathResponse.parse(self.client.receive(self.params.timeout))

        if isinstance(response, PathFailure):
            self.domain_errors += 1
            metrics.DOMAIN_ERRORS.inc()
            logger.warning("Path service replied with an error", {"reason": response.reason})
            return None

        elapsed = self.clock() - start
        metrics.RTT.observe(elapsed)
        logger.info("Shortest path received", {"path": list(response.path)})

        return elapsed

    def run(self) -> Summary:
        retries = 0
        limit = self.params.retry_limit

        while len(self.statistics) < self.params.samples:
            elapsed = self.cycle()

            if elapsed is None:
                retries += 1
                if limit is not None and retries > limit:
                    raise RetryLimitExceeded(
                        f"Sample {len(self.statistics) + 1} failed {retries} times in a row"
                    )
                continue

            retries = 0
            self.statistics.add(elapsed)

        summary = self.statistics.summary()
        metrics.RTT_MEAN.set(summary.mean)
        metrics.RTT_STD.set(summary.std)

        logger.info(
            "average RTT is %.2f ms (+- %.2f ms)" % (summary.mean_ms, summary.std_ms),
            {
                **summary.as_dict(),
                "published": self.published,
                "domain_errors": self.domain_errors,
            },
        )

        return summary
