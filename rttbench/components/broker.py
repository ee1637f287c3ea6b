import logging
import socket
import time
from collections import deque
from typing import Optional

from kombu import Connection, Consumer, Producer
from kombu.exceptions import KombuError

from .config_parser import BrokerParams, TopologyParams
from .errors import BenchmarkCancelled, ResponseTimeout, SetupError, TransmissionError
from .identity import ClientIdentity
from .logs import configure_logging
from .messages import CONTENT_ENCODING, CONTENT_TYPE
from .shutdown import Shutdown
from .topology import Topology

configure_logging()
logger = logging.getLogger(__name__)


class BrokerClient:
    """
    Connection to the broker held for a whole run. Requests are published on the
    shared requests queue, replies are read from the private response queue one at a
    time.
    """

    def __init__(
        self,
        params: BrokerParams,
        topology: TopologyParams,
        identity: ClientIdentity,
        shutdown: Optional[Shutdown] = None,
    ):
        self.params = params
        self.identity = identity
        self.topology = Topology(topology, identity)
        self.shutdown = shutdown or Shutdown()

        self.connection: Optional[Connection] = None
        self.channel = None
        self.producer: Optional[Producer] = None
        self.consumer: Optional[Consumer] = None
        self.response_queue = None

        self._mailbox = deque[bytes]()

    @property
    def errors(self) -> tuple:
        return (KombuError,) + self.connection.connection_errors + self.connection.channel_errors

    def connect(self) -> "BrokerClient":
        # resolving the error classes loads the transport named by the url scheme
        try:
            self.connection = Connection(
                self.params.url, connect_timeout=self.params.connect_timeout
            )
            errors = self.errors
        except (KeyError, ImportError) as err:
            self.connection = None
            raise SetupError(f"Unsupported broker transport: {err}") from err

        try:
            self.connection.ensure_connection(max_retries=self.params.connect_retries)
            self.channel = self.connection.channel()
            self.response_queue = self.topology.declare(self.channel)

            self.producer = Producer(self.channel)
            self.consumer = Consumer(
                self.channel,
                queues=[self.response_queue],
                on_message=self._on_message,
                no_ack=True,
                auto_declare=False,
            )
            self.consumer.consume()
        except errors as err:
            self.close()
            raise SetupError(f"Could not set up the broker topology: {err}") from err

        logger.info(
            "Connected to broker",
            {"broker": self.connection.as_uri(), "client_uuid": self.identity.routing_key},
        )

        return self

    def close(self):
        if self.connection is None:
            return

        self.connection.release()
        self.connection = None
        logger.debug("Broker connection released")

    def publish(self, body: bytes):
        try:
            self.producer.publish(
                body,
                exchange="",
                routing_key=self.topology.requests.name,
                content_type=CONTENT_TYPE,
                content_encoding=CONTENT_ENCODING,
            )
        except self.errors as err:
            raise TransmissionError(f"Could not publish request: {err}") from err

    def receive(self, timeout: Optional[float] = None) -> bytes:
        """
        Block until a reply reaches the response queue and return its raw body.
        :param timeout: seconds to wait for the reply, None to wait forever.
        :raises ResponseTimeout: no reply within `timeout`.
        :raises BenchmarkCancelled: shutdown requested while waiting.
        :raises TransmissionError: broker connection lost while waiting.
        """
        deadline = None if timeout is None else time.monotonic() + timeout

        while not self._mailbox:
            if self.shutdown.requested:
                raise BenchmarkCancelled("Shutdown requested while waiting for a reply")

            wait = self.params.poll_interval
            if deadline is not None:
                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    raise ResponseTimeout(f"No reply received within {timeout}s")
                wait = min(wait, remaining)

            try:
                self.connection.drain_events(timeout=wait)
            except socket.timeout:
                continue
            except self.errors as err:
                raise TransmissionError(f"Lost broker connection: {err}") from err

        return self._mailbox.popleft()

    def _on_message(self, message):
        body = message.body
        if isinstance(body, str):
            body = body.encode(CONTENT_ENCODING)
        self._mailbox.append(body)

    def __enter__(self) -> "BrokerClient":
        return self.connect()

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
