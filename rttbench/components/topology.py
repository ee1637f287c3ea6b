import logging

from kombu import Exchange, Queue

from .config_parser import TopologyParams
from .identity import ClientIdentity
from .logs import configure_logging

configure_logging()
logger = logging.getLogger(__name__)


class Topology:
    """
    Broker entities needed by a client:
    - a durable direct exchange on which the service publishes its replies,
    - the shared queue the service consumes requests from,
    - a private, server-named queue bound to the exchange with the client identity,
      so that only the replies addressed to this client land in it.
    """

    def __init__(self, params: TopologyParams, identity: ClientIdentity):
        self.identity = identity

        self.exchange = Exchange(
            params.exchange, type="direct", durable=True, auto_delete=False
        )
        self.requests = Queue(
            params.requests_queue, durable=False, auto_delete=False, exclusive=False
        )
        self.responses = Queue(
            "",
            exchange=self.exchange,
            routing_key=identity.routing_key,
            durable=False,
            auto_delete=True,
            exclusive=True,
        )

    def declare(self, channel) -> Queue:
        """
        Declare every entity on the given channel and return the bound response queue,
        named by the server.
        """
        self.exchange(channel).declare()
        self.requests(channel).declare()

        responses = self.responses(channel)
        responses.declare()

        logger.info(
            "Topology declared",
            {
                "exchange": self.exchange.name,
                "requests_queue": self.requests.name,
                "response_queue": responses.name,
                "routing_key": responses.routing_key,
            },
        )

        return responses
