from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import typer

from app.schemas import SensorRecordPayload
from cli.client import ApiClient
from cli.config import CLIConfig, load_config
from cli.render import render_record
from logging_config import configure_logging
from services.decoder import build_default_decoder
from services.errors import DecodeError


@dataclass
class CLIState:
    config: CLIConfig
    client: Optional[ApiClient] = None


app = typer.Typer(
    help="Decode SkyAlert cloud sensor lines locally or through the decoder service.",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _get_state(ctx: typer.Context) -> CLIState:
    state = ctx.obj
    if not isinstance(state, CLIState):
        raise typer.Exit(code=1)
    return state


def _get_client(ctx: typer.Context) -> ApiClient:
    state = _get_state(ctx)
    if state.client is None:
        state.client = ApiClient(state.config)
        ctx.call_on_close(state.client.close)
    return state.client


def _read_first_line(path: Path) -> bytes:
    contents = path.read_bytes()
    if not contents.strip():
        raise typer.BadParameter(f"File {path} is empty.")
    return contents.splitlines()[0]


@app.callback()
def main(
    ctx: typer.Context,
    base_url: Optional[str] = typer.Option(
        None,
        "--base-url",
        "-b",
        help="Decoder API base URL (defaults to API_BASE_URL env or http://localhost:8000).",
    ),
    timeout: Optional[float] = typer.Option(
        None,
        "--timeout",
        help="Seconds to wait for the decoder service to answer.",
    ),
) -> None:
    """Entry point for the CLI."""
    configure_logging()
    config = load_config(base_url=base_url, timeout=timeout)
    ctx.obj = CLIState(config=config)


@app.command("decode")
def decode_command(
    file: Path = typer.Argument(
        ..., exists=True, dir_okay=False, readable=True, help="Path to the sensor data file."
    ),
    tz: Optional[str] = typer.Option(
        None,
        "--tz",
        help="IANA zone the sensor clock runs in (defaults to SKYALERT_TIMEZONE or the local zone).",
    ),
    as_json: bool = typer.Option(
        False,
        "--json/--no-json",
        help="Print the record as JSON instead of key/value lines.",
    ),
) -> None:
    """Decode the first line of a local sensor data file."""
    line = _read_first_line(file)
    try:
        decoder = build_default_decoder(tz)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--tz") from exc

    try:
        record = decoder.decode(line)
    except DecodeError as exc:
        typer.secho(f"Could not decode {file}: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc

    payload = SensorRecordPayload.from_record(record)
    if as_json:
        typer.echo(payload.model_dump_json(indent=2))
        return
    render_record(payload.model_dump(mode="json"))


@app.command("upload")
def upload_command(
    ctx: typer.Context,
    file: Path = typer.Argument(
        ..., exists=True, dir_okay=False, readable=True, help="Path to the sensor data file."
    ),
    tz: Optional[str] = typer.Option(
        None,
        "--tz",
        help="IANA zone the sensor clock runs in (defaults to the service zone).",
    ),
) -> None:
    """Send a sensor data file to the decoder service and show the result."""
    state = _get_state(ctx)
    typer.echo(f"Uploading {file} to {state.config.base_url} ...")
    payload = _get_client(ctx).upload_file(file, tz=tz)
    typer.echo()
    render_record(payload)
