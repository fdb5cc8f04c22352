"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdcontent.cli.commands import check_cmd, index_cmd, list_cmd, show_cmd


app = typer.Typer(name="mdcontent", no_args_is_help=True, help="Front-matter content record store")

app.command(name="check")(check_cmd)
app.command(name="list")(list_cmd)
app.command(name="show")(show_cmd)
app.command(name="index")(index_cmd)
