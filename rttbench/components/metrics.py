from prometheus_client import Counter, Gauge, Histogram

REQUESTS_PUBLISHED = Counter(
    "rttbench_requests_published_total", "Requests published to the requests queue"
)
DOMAIN_ERRORS = Counter(
    "rttbench_domain_errors_total", "Replies carrying an error, retried without sampling"
)
RTT = Histogram(
    "rttbench_rtt_seconds",
    "Round-trip time of successful requests",
    buckets=(0.0005, 0.001, 0.0025, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0),
)
RTT_MEAN = Gauge("rttbench_rtt_mean_seconds", "Mean round-trip time of the last run")
RTT_STD = Gauge("rttbench_rtt_std_seconds", "Population std of the round-trip time of the last run")
