"""CLI entrypoint: Typer app definition and command registration"""

import typer

from bookpress.cli.commands import build_cmd, init_cmd, inspect_cmd


app = typer.Typer(name="bookpress", no_args_is_help=True, help="Assemble text sections into an EPUB book")

app.command(name="build")(build_cmd)
app.command(name="inspect")(inspect_cmd)
app.command(name="init")(init_cmd)
