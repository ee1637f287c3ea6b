from . import config_parser, errors, metrics
from .broker import BrokerClient
from .identity import ClientIdentity
from .shutdown import Shutdown
from .statistics import Statistics, Summary
from .topology import Topology

__all__ = [
    "BrokerClient",
    "ClientIdentity",
    "Shutdown",
    "Statistics",
    "Summary",
    "Topology",
    "config_parser",
    "errors",
    "metrics",
]
