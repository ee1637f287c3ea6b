class BenchmarkError(Exception):
    """
    Base class of every error that aborts a benchmark run. Domain errors reported by
    the remote service are not exceptions, they are handled inside the driver loop.
    """


class SetupError(BenchmarkError):
    """Connection, declaration or binding failure before any measurement."""


class TransmissionError(BenchmarkError):
    """Publishing a request failed, or the broker went away while waiting."""


class DecodeError(BenchmarkError):
    """A response could not be decoded. Indicates a protocol mismatch."""


class ResponseTimeout(BenchmarkError):
    pass


class RetryLimitExceeded(BenchmarkError):
    pass


class BenchmarkCancelled(BenchmarkError):
    pass
