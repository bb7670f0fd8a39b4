"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdlexical.cli.commands import convert_cmd, inspect_cmd


app = typer.Typer(name="mdlexical", no_args_is_help=True, help="Markdown to structured document tree converter")

app.command(name="convert")(convert_cmd)
app.command(name="inspect")(inspect_cmd)
