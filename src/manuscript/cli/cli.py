"""CLI entrypoint: Typer app definition and command registration"""

import typer

from manuscript.cli.commands import extract_cmd, index_cmd, lookup_cmd, parse_cmd, tokenize_cmd


app = typer.Typer(name="manuscript", no_args_is_help=True, help="Manuscript parsing and internal link extraction")

app.command(name="parse")(parse_cmd)
app.command(name="extract")(extract_cmd)
app.command(name="tokenize")(tokenize_cmd)
app.command(name="index")(index_cmd)
app.command(name="lookup")(lookup_cmd)
