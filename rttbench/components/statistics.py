from dataclasses import dataclass
from statistics import fmean, pstdev


@dataclass(frozen=True)
class Summary:
    count: int
    mean: float
    std: float

    @property
    def mean_ms(self) -> float:
        return self.mean * 1e3

    @property
    def std_ms(self) -> float:
        return self.std * 1e3

    def as_dict(self) -> dict:
        return {"count": self.count, "mean_ms": self.mean_ms, "std_ms": self.std_ms}


class Statistics:
    """
    Latency samples of a run, in seconds. The standard deviation is the population
    one (divisor N).
    """

    def __init__(self):
        self.samples = list[float]()

    def add(self, value: float):
        if value < 0:
            raise ValueError(f"Latency sample must be positive or null, got {value}")
        self.samples.append(value)

    def __len__(self):
        return len(self.samples)

    @property
    def mean(self) -> float:
        if not self.samples:
            raise ValueError("No sample collected")

        return fmean(self.samples)

    @property
    def std(self) -> float:
        return pstdev(self.samples, self.mean)

    def summary(self) -> Summary:
        return Summary(len(self.samples), self.mean, self.std)
