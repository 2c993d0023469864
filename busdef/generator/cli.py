"""Command-line interface for busdef."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click
from lark.exceptions import UnexpectedInput
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from busdef.defs import InterfaceDef, SignalDef
from busdef.generator import check_member, parse, read, render
from busdef.generator.parser import ValidationError

logger = logging.getLogger(__name__)


def _load(input_file: str) -> list[InterfaceDef]:
    """Load a definition file, or introspection XML when the suffix is .xml."""
    text = Path(input_file).read_text(encoding="utf-8")
    try:
        if input_file.endswith(".xml"):
            return read(text)
        return parse(text)
    except (ValidationError, UnexpectedInput, ValueError) as e:
        raise click.ClickException(str(e)) from e


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Bus interface definition tools."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        )


@cli.command()
@click.option("--input", "-i", "input_file", required=True, help="Definition or XML file")
@click.option("--output", "-o", "output_file", required=True, help="Output file")
@click.option("--path", default=None, help="Object path for the <node> element")
def gen(input_file: str, output_file: str, path: str | None) -> None:
    """Generate introspection XML."""
    interfaces = _load(input_file)
    generated_file = render(interfaces, path=path)

    with open(output_file, "w", encoding="utf-8") as f:
        f.write(generated_file)
    logger.debug("Wrote %s", output_file)


@cli.command()
@click.option("--input", "-i", "input_file", required=True, help="Definition or XML file")
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
def info(input_file: str, output_json: bool) -> None:
    """Display interface members and their flags."""
    interfaces = _load(input_file)

    if output_json:
        print(json.dumps([i.to_dict(encode_json=True) for i in interfaces], indent=2))
    else:
        _output_plain(interfaces)


@cli.command()
@click.option("--input", "-i", "input_file", required=True, help="Definition or XML file")
def check(input_file: str) -> None:
    """Check member signatures against their arguments."""
    interfaces = _load(input_file)

    problems = [p for i in interfaces for m in i.members for p in check_member(m)]
    for problem in problems:
        print(problem)
    if problems:
        sys.exit(1)
    print(f"{len(interfaces)} interfaces OK")


def _flags(member: object) -> str:
    """Comma separated list of the flags set on a member."""
    names = [
        "deprecated",
        "sessionless",
        "sessioncast",
        "unicast",
        "global_broadcast",
        "no_reply",
    ]
    return ", ".join(n for n in names if getattr(member, f"is_{n}", False))


def _output_plain(interfaces: list[InterfaceDef]) -> None:
    """Output interfaces using rich text formatting."""
    console = Console()

    for interface in interfaces:
        title = f"[bold cyan]{interface.name}[/bold cyan]"
        if interface.is_secure:
            title += " [yellow](secure)[/yellow]"
        console.print(title)

        table = Table(show_header=True, box=None, padding=(0, 2, 0, 0))
        table.add_column("Kind", style="dim")
        table.add_column("Name", style="white")
        table.add_column("Signature", style="yellow")
        table.add_column("Reply", style="yellow")
        table.add_column("Flags", style="green")

        for member in interface.members:
            kind = "signal" if isinstance(member, SignalDef) else "method"
            table.add_row(
                kind, member.name, member.signature, member.reply_signature, _flags(member)
            )
        for prop in interface.properties:
            table.add_row(
                "property", prop.name, prop.type_signature, str(prop.access), _flags(prop)
            )

        console.print(table)
        console.print()


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
