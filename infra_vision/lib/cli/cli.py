import logging
from dataclasses import asdict, fields

import click

from infra_vision.module_manager import MODULES
from infra_vision.modules.azure.vision_api.config import VisionApiConfig
from infra_vision.modules.azure.vision_api.names import resolve_resource_names

_NAME_OVERRIDES = sorted(
    f.name for f in fields(VisionApiConfig) if f.name.endswith("_name") and f.name != "environment_name"
)


def echo_key_value(key, value):
    click.echo(click.style(f"{key}: ", fg="green", bold=True) + str(value))


def _parse_overrides(ctx, param, values) -> dict[str, str]:
    overrides = {}

    for value in values:
        key, sep, name = value.partition("=")
        if not sep:
            raise click.BadParameter(f"expected KIND=VALUE, got `{value}`", ctx=ctx, param=param)
        if key not in _NAME_OVERRIDES:
            raise click.BadParameter(f"`{key}` is not one of {', '.join(_NAME_OVERRIDES)}", ctx=ctx, param=param)

        overrides[key] = name

    return overrides


@click.group()
@click.option("--debug", is_flag=True, default=False, help="Enable DEBUG logging")
def cli(debug):
    logging.basicConfig(format="[%(asctime)s %(levelname)s %(name)s %(threadName)s]: %(message)s")

    if debug:
        logging.getLogger().setLevel(logging.DEBUG)
        click.echo("Enabled debug mode!")


@cli.command()
def modules():
    """List the modules a stack can be named after"""
    for stack, module_cls in sorted(MODULES.items()):
        echo_key_value(stack, module_cls.__name__)


@cli.command()
@click.option("--environment-name", required=True, help="Environment name")
@click.option("--location", required=True, help="Azure region")
@click.option("--subscription-id", required=True, help="Subscription the environment is deployed to")
@click.option(
    "--name-override",
    "overrides",
    multiple=True,
    callback=_parse_overrides,
    help="Explicit resource name as KIND=VALUE, like `storage_account_name=stmyapp`",
)
def names(environment_name, location, subscription_id, overrides):
    """Print the resource names an environment resolves to"""
    try:
        # access grants don't change names, so skip the principal requirement
        config = VisionApiConfig(
            environment_name=environment_name,
            location=location,
            is_continuous_deployment=True,
            **overrides,
        )
    except ValueError as e:
        raise click.UsageError(str(e))

    for key, value in asdict(resolve_resource_names(config, subscription_id)).items():
        echo_key_value(key, value)


def run():
    exit(cli())


if __name__ == "__main__":
    run()
