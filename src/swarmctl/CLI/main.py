"""
Command Line Interface for swarmctl.
"""
import csv
import logging
import click
import yaml
from ..CLIENT.api_client import OrchestratorClient
from ..MANAGERS.service_creator import ServiceCreator
from ..MODELS.client_config import ClientConfig
from ..MODELS.create_options import ServiceCreateOptions
from ..PARSERS.spec_file_parser import SpecFileParser
from ..errors import SwarmctlError


def _split_values(values):
    """
    Flattens repeated list flags, splitting each value on commas.
    Quoted fields may contain commas, e.g. --env '"A=x,y"'.
    """
    items = []
    for value in values:
        items.extend(next(csv.reader([value]), []))
    return items


def _list_option(ctx, param, value):
    return _split_values(value)


def _optional_list_option(ctx, param, value):
    # Absent flag stays None so that no endpoint is built.
    if not value:
        return None
    return _split_values(value)


def make_creator(config: ClientConfig) -> ServiceCreator:
    """
    Creates the service creator talking to the configured orchestrator.
    """
    client = OrchestratorClient(config)
    return ServiceCreator(resolver=client, submitter=client)


@click.group()
@click.option('--host', default=None, help='Orchestration API address (env: SWARMCTL_HOST)')
@click.option('--timeout', type=float, default=None, help='Request timeout in seconds')
@click.option('--log-level', default='WARNING', show_default=True,
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False))
@click.pass_context
def cli(ctx, host, timeout, log_level):
    """
    swarmctl - control a swarm orchestrator.
    """
    logging.basicConfig(level=log_level.upper(), format='%(levelname)s %(name)s: %(message)s')
    ctx.ensure_object(dict)
    try:
        config = ClientConfig.from_env(host=host, timeout=timeout)
    except SwarmctlError as e:
        raise click.ClickException(str(e)) from e
    ctx.obj['creator'] = make_creator(config)


@cli.group()
def service():
    """Manage services."""


@service.command()
@click.option('--name', default='', help='Service name')
@click.option('--image', default='', help='Image')
@click.option('--args', 'command', multiple=True, callback=_list_option, help='Container command')
@click.option('--env', multiple=True, callback=_list_option, help='Environment variables (KEY=VALUE)')
@click.option('--ports', multiple=True, callback=_optional_list_option,
              help='Ports, as name:port[/protocol][:node_port[/protocol]]')
@click.option('--file', '-f', 'spec_file', type=click.Path(dir_okay=False), default=None,
              help='Spec to use')
@click.option('--network', default=None, help='Network name')
@click.option('--mode', default='replicated', show_default=True, help='one of replicated, global')
@click.option('--instances', type=click.IntRange(min=0), default=1, show_default=True,
              help='Number of instances for the service')
@click.option('--dry-run', is_flag=True, help='Print the spec instead of creating the service')
@click.argument('args', nargs=-1)
@click.pass_context
def create(ctx, name, image, command, env, ports, spec_file, network, mode, instances, dry_run, args):
    """Create a service.

    Trailing ARGS are passed to the container command.
    """
    creator = ctx.obj['creator']
    try:
        if spec_file:
            spec = creator.attach(SpecFileParser().parse(spec_file), network)
        else:
            options = ServiceCreateOptions(
                name=name,
                image=image,
                mode=mode,
                instances=instances,
                command=command,
                args=list(args),
                env=env,
                ports=ports,
                network=network,
            )
            spec = creator.prepare(options)

        if dry_run:
            click.echo(yaml.safe_dump(spec.model_dump(mode='json'), sort_keys=False), nl=False)
            return

        click.echo(creator.submit(spec))
    except SwarmctlError as e:
        raise click.ClickException(str(e)) from e


def main():
    """
    Main entry point for the CLI.
    """
    cli(obj={})


if __name__ == '__main__':
    main()
