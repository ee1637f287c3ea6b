from .benchmark import BenchmarkParams, MetricsParams, RequestParams
from .broker import BrokerParams, TopologyParams
from .parameters import DEFAULTS, Parameters

__all__ = [
    "DEFAULTS",
    "Parameters",
    "BrokerParams",
    "TopologyParams",
    "BenchmarkParams",
    "RequestParams",
    "MetricsParams",
]
