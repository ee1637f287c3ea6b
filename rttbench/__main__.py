import logging
import sys
from typing import Optional

import click
from prometheus_client import start_http_server

from .benchmark import Benchmark
from .components import BrokerClient, ClientIdentity, Shutdown
from .components.config_parser import Parameters
from .components.errors import BenchmarkCancelled, BenchmarkError
from .components.logs import configure_logging

configure_logging()
logger = logging.getLogger(__name__)

BROKER_URL_ENVVAR = "RTTBENCH_BROKER_URL"


@click.command()
@click.option(
    "--configfile",
    type=click.Path(exists=True, dir_okay=False),
    help="The .yaml configuration file to use",
)
@click.option("--url", help=f"Broker URL, overrides the config file and {BROKER_URL_ENVVAR}")
@click.option(
    "--samples", "-n", type=click.IntRange(min=1), help="Number of successful round trips"
)
@click.option(
    "--timeout", type=click.FloatRange(min=0), help="Seconds to wait for a reply, 0 waits forever"
)
@click.option(
    "--max-retries",
    type=click.IntRange(min=0),
    help="Consecutive error replies tolerated for one sample, 0 for no limit",
)
@click.option(
    "--metrics-port",
    type=click.IntRange(0, 65535),
    help="Expose Prometheus metrics on this port, 0 to disable",
)
def main(
    configfile: Optional[str],
    url: Optional[str],
    samples: Optional[int],
    timeout: Optional[float],
    max_retries: Optional[int],
    metrics_port: Optional[int],
):
    try:
        params = Parameters.load(configfile)
        params.broker.set_attribute_from_env("url", BROKER_URL_ENVVAR)

        if url is not None:
            params.broker.url = url
        if samples is not None:
            params.benchmark.samples = samples
        if timeout is not None:
            params.benchmark.response_timeout = timeout
        if max_retries is not None:
            params.benchmark.max_retries = max_retries
        if metrics_port is not None:
            params.metrics.port = metrics_port

        params.validate()
    except (KeyError, ValueError) as err:
        raise click.UsageError(f"Invalid configuration: {err}")

    if params.metrics.port:
        try:
            start_http_server(params.metrics.port)
        except OSError as err:
            logger.error(
                "Could not start the prometheus client",
                {"port": params.metrics.port, "error": str(err)},
            )
        else:
            logger.info("Prometheus client started", {"port": params.metrics.port})

    identity = ClientIdentity()
    shutdown = Shutdown().install()

    try:
        with BrokerClient(params.broker, params.topology, identity, shutdown) as client:
            summary = Benchmark(client, identity, params.benchmark).run()
    except BenchmarkCancelled as err:
        logger.warning("Benchmark cancelled", {"error": str(err)})
        sys.exit(130)
    except BenchmarkError as err:
        logger.error("Benchmark aborted", {"error": str(err), "type": type(err).__name__})
        sys.exit(1)

    click.echo(f"average RTT is {summary.mean_ms:.2f} ms (+- {summary.std_ms:.2f} ms)")


if __name__ == "__main__":
    main()
