"""CLI entrypoint: Typer app definition and command registration"""

import typer

from streammd.cli.commands import parse_cmd, plain_cmd, stream_cmd


app = typer.Typer(name="streammd", no_args_is_help=True, help="Streaming-safe markdown subset parser")

app.command(name="parse")(parse_cmd)
app.command(name="plain")(plain_cmd)
app.command(name="stream")(stream_cmd)
