"""
Validate a traffic generation request file before handing it to the generator.

Usage::

    p4tg-validate request.json --tofino2
    p4tg-validate request.json --mode Mpps --limits limits.json
"""

import sys
from typing import List, Optional

import click
import pydantic
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .dataset import TrafficGenRequest
from .entry import RequestValidator
from .model import HardwareLimits
from .plugin.config_checkers import get_total_rate, resolve_encapsulation
from .utils import constants as const
from .utils.exceptions import LimitsFileNotValid, RequestValidationError

EXIT_REJECTED = 1
EXIT_NOT_PARSED = 2

console = Console()


def stream_table(request: TrafficGenRequest) -> Table:
    table = Table(title=f"Streams ({request.mode.value})")
    for column in ("stream", "encapsulation", "frame size", "IP", "VxLAN", "rate", "ports"):
        table.add_column(column)
    for stream in request.streams:
        ports: List[str] = [
            str(s.port) for s in request.stream_settings if s.stream_id == stream.stream_id
        ]
        table.add_row(
            f"#{stream.stream_id}",
            stream.encapsulation.value,
            f"{stream.frame_size}B",
            f"v{stream.ip_version}" if stream.ip_version is not None else "-",
            "yes" if stream.vxlan else "no",
            str(stream.traffic_rate),
            ", ".join(ports) or "-",
        )
    return table


@click.command()
@click.argument("request_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--tofino2/--tofino1", default=False, help="Target hardware generation.")
@click.option(
    "--limits",
    "limits_file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="JSON file overriding the hardware limits.",
)
@click.option(
    "--mode",
    type=click.Choice([m.value for m in const.GenerationMode], case_sensitive=False),
    default=None,
    help="Override the generation mode of the request.",
)
def main(request_file: str, tofino2: bool, limits_file: Optional[str], mode: Optional[str]) -> None:
    """Check REQUEST_FILE against the traffic generator's rules."""
    try:
        limits = HardwareLimits.from_file(limits_file) if limits_file else HardwareLimits()
        request = TrafficGenRequest.from_file(request_file)
    except (LimitsFileNotValid, pydantic.ValidationError) as e:
        console.print(f"[red]Could not parse input:[/red] {escape(str(e))}", soft_wrap=True)
        sys.exit(EXIT_NOT_PARSED)
    if mode is not None:
        request = request.model_copy(update={"mode": const.GenerationMode(mode)})

    console.print(stream_table(request))
    try:
        RequestValidator(limits).validate(
            request.streams, request.stream_settings, request.mode, tofino2
        )
    except RequestValidationError as e:
        console.print(f"[red]Rejected:[/red] {escape(e.msg)}", soft_wrap=True)
        sys.exit(EXIT_REJECTED)

    headers = [resolve_encapsulation(s, tofino2, limits) for s in request.streams]
    rate = get_total_rate(request.streams, headers, request.mode)
    console.print(
        f"[green]Accepted[/green] ({rate:.2f} of {limits.max_rate(tofino2):.2f} Gbps)"
    )


if __name__ == "__main__":
    main()
