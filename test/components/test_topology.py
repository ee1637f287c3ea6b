import pytest
from kombu import Connection, Producer

from rttbench.components import ClientIdentity, Topology
from rttbench.components.config_parser import Parameters


@pytest.fixture
def topology(memory_params: Parameters, identity: ClientIdentity) -> Topology:
    return Topology(memory_params.topology, identity)


def test_entities(topology: Topology, memory_params: Parameters):
    assert topology.exchange.name == memory_params.topology.exchange
    assert topology.exchange.type == "direct"
    assert topology.exchange.durable is True
    assert topology.exchange.auto_delete is False

    assert topology.requests.name == memory_params.topology.requests_queue
    assert topology.requests.durable is False
    assert topology.requests.auto_delete is False
    assert topology.requests.exclusive is False

    assert topology.responses.name == ""
    assert topology.responses.exchange == topology.exchange
    assert topology.responses.durable is False
    assert topology.responses.auto_delete is True
    assert topology.responses.exclusive is True


def test_binding_key_is_identity(topology: Topology, identity: ClientIdentity):
    assert topology.responses.routing_key == str(identity.value)


def test_declare_names_response_queue(topology: Topology, identity: ClientIdentity):
    with Connection("memory://") as connection:
        responses = topology.declare(connection.channel())

    assert responses.name != ""
    assert responses.routing_key == identity.routing_key


def test_only_own_replies_are_routed(
    topology: Topology, identity: ClientIdentity, memory_params: Parameters
):
    with Connection("memory://") as connection:
        channel = connection.channel()
        responses = topology.declare(channel)

        producer = Producer(channel)
        deliveries = [(str(ClientIdentity()), b"other"), (identity.routing_key, b"mine")]
        for routing_key, body in deliveries:
            producer.publish(
                body,
                exchange=memory_params.topology.exchange,
                routing_key=routing_key,
                content_type="application/json",
                content_encoding="utf-8",
            )

        message = responses.get(no_ack=True)
        assert message is not None
        assert message.body == b"mine"
        assert responses.get(no_ack=True) is None


def test_each_declare_gets_a_fresh_queue(topology: Topology):
    with Connection("memory://") as connection:
        channel = connection.channel()
        first = topology.declare(channel)
        second = topology.declare(channel)

    assert first.name != second.name
    assert topology.responses.name == ""
