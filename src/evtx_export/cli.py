import sys
from contextlib import ExitStack
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from dotenv import load_dotenv

from evtx_export.errors import ConfigurationError, EvtxExportError
from evtx_export.formats import OutputFormat, parse_format
from evtx_export.logging_setup import configure_logging, get_logger
from evtx_export.settings import Settings, config_path_for
from evtx_export.sink import OutputSink
from evtx_export.sources import open_source
from evtx_export.stream_writer import run

console = Console(stderr=True, soft_wrap=True)

app = typer.Typer(help="Convert Windows event logs to csv, json, jsonl or xml.")


@app.callback()
def main():
    load_dotenv(override=False)


def _load_settings(env: str) -> Settings:
    s = Settings.load(config_path_for(env))
    configure_logging(
        level=s.logging.level,
        format_type=s.logging.format,
        structured=s.logging.structured,
    )
    return s


def _fail(e: EvtxExportError) -> typer.Exit:
    console.print(f"[red]{escape(str(e))}[/]")
    return typer.Exit(code=2 if isinstance(e, ConfigurationError) else 1)


@app.command()
def convert(
    input_path: str = typer.Option(..., "--input", "-i", help="Input .evtx or XML dump"),
    output_path: str = typer.Option(..., "--output", "-o", help="Output file, '-' for stdout"),
    format_name: Optional[str] = typer.Option(
        None, "--format", "-f", help="csv|json|jsonl|xml (default from config)"
    ),
    env: str = typer.Option("dev", help="Config environment"),
):
    """Export every record of INPUT to OUTPUT in the chosen format."""
    try:
        s = _load_settings(env)
        fmt = parse_format(format_name) if format_name else s.export.default_format
    except EvtxExportError as e:
        raise _fail(e)

    log = get_logger("evtx_export.convert")
    try:
        with ExitStack() as stack:
            source = stack.enter_context(open_source(input_path))
            if output_path == "-":
                stream = sys.stdout
            else:
                stream = stack.enter_context(
                    open(output_path, "w", encoding=s.export.encoding, newline="")
                )
            sink = OutputSink(stream)
            summary = run(source.count(), fmt, source, sink)
            sink.flush()
    except OSError as e:
        # Opening, flushing or closing the output file failed.
        log.error("Export failed", input=input_path, output=output_path, error=str(e))
        console.print(f"[red]Failed to write output {escape(output_path)}: {escape(str(e))}[/]")
        raise typer.Exit(code=1)
    except EvtxExportError as e:
        log.error("Export failed", input=input_path, output=output_path, error=str(e))
        raise _fail(e)

    console.print(
        f"[bold cyan]evtx-export[/] {escape(input_path)} -> {escape(output_path)} format={fmt.value} "
        f"written={summary.written} skipped={summary.skipped}"
    )


@app.command()
def count(
    input_path: str = typer.Option(..., "--input", "-i", help="Input .evtx or XML dump"),
    env: str = typer.Option("dev", help="Config environment"),
):
    """Print the number of records in INPUT."""
    try:
        _load_settings(env)
        with open_source(input_path) as source:
            print(source.count())
    except EvtxExportError as e:
        raise _fail(e)


@app.command()
def formats():
    """List the supported output formats."""
    for f in OutputFormat:
        print(f.value)


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        sys.exit(130)
