"""Root CLI group for notifyctl with global flags and command registration."""

from __future__ import annotations

import click

from notifyctl import __version__
from notifyctl.commands import register_commands
from notifyctl.commands._context import AppContext
from notifyctl.config.settings import NotifySettings
from notifyctl.domain.types import BrokerType


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="notifyctl")
@click.option(
    "--broker",
    type=click.Choice([b.value for b in BrokerType]),
    default=None,
    help="Broker type: kafka or kinesis. [default: kafka]",
)
@click.option(
    "--kafka-brokers",
    default=None,
    help="Comma-separated list of Kafka brokers. [default: localhost:9092]",
)
@click.option("--kafka-topic", default=None, help="Kafka topic. [default: notifications]")
@click.option("--aws-region", default=None, help="AWS region. [default: us-east-1]")
@click.option(
    "--kinesis-stream", default=None, help="Kinesis stream name. [default: notifications]"
)
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug logs.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    broker: str | None,
    kafka_brokers: str | None,
    kafka_topic: str | None,
    aws_region: str | None,
    kinesis_stream: str | None,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """notifyctl: broadcast notifications to Kafka or Kinesis."""
    settings = NotifySettings.from_cli(
        config_path=config_path,
        broker=broker,
        kafka_brokers=kafka_brokers,
        kafka_topic=kafka_topic,
        aws_region=aws_region,
        kinesis_stream=kinesis_stream,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    app = AppContext(settings)
    ctx.obj = app
    ctx.call_on_close(app.close)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)


def main() -> None:
    """Console-script entry point."""
    cli()
