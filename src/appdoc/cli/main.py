#!/usr/bin/env python3
"""Application document command line tool."""

import click

from appdoc import __version__, config
from appdoc.error import AppDocException
from appdoc.generator import ApplicationDocumentGenerator, build_view, validate_application_id
from appdoc.store import InMemoryApplicationStore


def load_store(data_file: str) -> InMemoryApplicationStore:
    """Load the application fixtures into an in-memory store.

    Raises:
        click.ClickException: If the file is not a list of valid application records
    """
    try:
        return InMemoryApplicationStore.from_json(data_file)
    except ValueError as e:
        raise click.ClickException(f"Invalid application data [{data_file}]: {e}")


@click.group()
@click.version_option(version=__version__)
def cli():
    """Application document command line tool."""
    pass


@cli.command()
@click.argument('application_id', type=str)
@click.option('--data', 'data_file', required=True, type=click.Path(exists=True, dir_okay=False),
              help='JSON file with the application records')
@click.option('--base-path', default=config.TEMPLATE_DIR, show_default=True,
              type=click.Path(file_okay=False, dir_okay=True),
              help='Directory the template paths are resolved against')
@click.option('--output', '-o', required=True, type=click.Path(dir_okay=False, writable=True),
              help='Where to write the pdf document')
def generate(application_id: str, data_file: str, base_path: str, output: str):
    """Generate the pdf document of an application.

    APPLICATION_ID: Identifier (UUID) of the application
    """
    store = load_store(data_file)
    try:
        pdf = ApplicationDocumentGenerator(store).generate(application_id, base_path)
    except AppDocException as e:
        raise click.ClickException(str(e))

    if pdf is None:
        raise click.ClickException(f"No document can be generated for application [{application_id}]")

    with open(output, 'wb') as fp:
        fp.write(pdf)

    click.echo(f"Written {len(pdf)} bytes to {output}")


@cli.command()
@click.argument('application_id', type=str)
@click.option('--data', 'data_file', required=True, type=click.Path(exists=True, dir_okay=False),
              help='JSON file with the application records')
def show(application_id: str, data_file: str):
    """Print the document fields of an application as JSON."""
    store = load_store(data_file)
    try:
        application = store.fetch(validate_application_id(application_id))
        selected = build_view(application)
    except AppDocException as e:
        raise click.ClickException(str(e))

    if selected is None:
        raise click.ClickException(f"Application is in state '{application.state}', no document available")

    template_key, view = selected
    click.echo(f"# {template_key}")
    click.echo(view.model_dump_json(indent=2))


if __name__ == '__main__':
    cli()
