import json
import logging

import click

from .errors import DocumentError
from .printer import NO_VALUE, Formatting, to_doc
from .schema import load_schema


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option(
    "--value",
    "-v",
    default=None,
    type=click.Path(exists=True, resolve_path=True),
    help="JSON file with a value to print instead of placeholders",
)
@click.option("--verbose", is_flag=True, default=False, help="Log what the printer is doing")
@click.argument("path", type=click.Path(exists=True, resolve_path=True))
@click.argument("output", default=None, required=False, type=click.Path(resolve_path=True))
def schema_to_doc(config, value, verbose, path, output):
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    with open(path) as f:
        schema = json.load(f)

    if config is not None:
        with open(config) as f:
            try:
                fmt = Formatting.from_dict(json.load(f))
            except (KeyError, ValueError) as e:
                raise click.BadParameter(f"invalid formatting option {e}", param_hint="--config") from e
    else:
        fmt = Formatting()

    if value is not None:
        with open(value) as f:
            value = json.load(f)
    else:
        value = NO_VALUE

    try:
        doc = to_doc(load_schema(schema), fmt, value=value)
    except DocumentError as e:
        raise click.ClickException(str(e)) from e

    if output is None:
        click.echo(doc)
    else:
        with open(output, "w") as f:
            f.write(doc)
