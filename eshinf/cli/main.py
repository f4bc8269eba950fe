"""eshinf CLI"""

import click

from eshinf import __version__
from eshinf.cli.check import check

from .debug import add_debug_option


@click.group()
@click.version_option(__version__, prog_name="eshinf")
@click.pass_context
def cli(ctx):
    """
    Static checks for the ESH-INF descriptors of a binding.
    """
    ctx.ensure_object(dict)


cli.add_command(add_debug_option(check))

add_debug_option(cli)

if __name__ == "__main__":
    cli(obj={})
