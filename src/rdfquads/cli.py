"""Command line interface for :mod:`rdfquads`."""

import io
import json
from typing import Optional

import click

from .api import count_by_graph, quad_to_dict, to_dataframe, write_quads
from .config import Config
from .decoder import Decoder
from .errors import NQuadsError
from .rdflib_bridge import add_quads

__all__ = [
    "main",
]

FILE_ARGUMENT = click.Path(dir_okay=False, allow_dash=True)


def _open_decoder(path: str, strict: bool = True) -> Decoder:
    """Open ``path`` for decoding; ``-`` reads standard input."""
    if path == "-":
        return Decoder(click.get_binary_stream("stdin"), strict=strict)
    return Decoder.open(path, strict=strict)


@click.group()
@click.version_option()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """rdfquads - RDF 1.1 N-Quads decoding toolkit.

    Validate, convert and load N-Quads documents (plain or gzipped).
    """
    import logging

    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose

    if verbose:
        logging.basicConfig(level=logging.DEBUG, format=Config.LOG_FORMAT, force=True)
        logging.getLogger("rdfquads").setLevel(logging.DEBUG)
    else:
        logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s", force=True)


@main.command()
@click.argument("files", nargs=-1, required=True, type=FILE_ARGUMENT)
@click.option(
    "--lenient",
    is_flag=True,
    help="Report every malformed line instead of stopping at the first one",
)
@click.pass_context
def validate(ctx: click.Context, files: tuple[str, ...], lenient: bool) -> None:
    """Check that FILES are valid N-Quads.

    Exits with status 1 if any file contains a malformed line.

    Example:
      rdfquads validate data.nq more.nq.gz
    """
    failed = False
    for path in files:
        try:
            with _open_decoder(path, strict=not lenient) as decoder:
                while decoder.next_quad() is not None:
                    pass
        except (NQuadsError, OSError) as e:
            click.echo(f"{path}: {e}", err=True)
            failed = True
            continue

        for error in decoder.errors:
            click.echo(f"{path}: {error}", err=True)
        if decoder.errors:
            failed = True
            click.echo(
                f"{path}: {decoder.quads_read} quads, {len(decoder.errors)} invalid lines"
            )
        else:
            click.echo(f"{path}: OK, {decoder.quads_read} quads in {decoder.lineno} lines")

    if failed:
        ctx.exit(1)


@main.command()
@click.argument("file", type=FILE_ARGUMENT)
@click.option(
    "--to",
    "output_format",
    type=click.Choice(["nquads", "jsonl", "csv"]),
    default="nquads",
    help="Output format (default: nquads)",
)
@click.option("--output", "-o", help="Output file (prints to console if omitted)")
@click.option("--lenient", is_flag=True, help="Skip malformed lines")
def convert(file: str, output_format: str, output: Optional[str], lenient: bool) -> None:
    """Re-serialize FILE as canonical N-Quads, JSON lines or CSV.

    Example:
      rdfquads convert data.nq.gz --to jsonl --output data.jsonl
    """
    try:
        with _open_decoder(file, strict=not lenient) as decoder:
            if output_format == "csv":
                df = to_dataframe(decoder)
                text = df.to_csv(index=False)
            elif output_format == "jsonl":
                text = "".join(json.dumps(quad_to_dict(q)) + "\n" for q in decoder)
            else:
                buffer = io.StringIO()
                write_quads(decoder, buffer)
                text = buffer.getvalue()

        if output:
            with open(output, "w", encoding="utf-8") as f:
                f.write(text)
            click.echo(f"OK Wrote {decoder.quads_read} quads to {output}", err=True)
        else:
            click.echo(text, nl=False)

    except (NQuadsError, OSError) as e:
        click.echo(f"Error: {e}", err=True)
        raise click.Abort()


@main.command()
@click.argument("file", type=FILE_ARGUMENT)
def stats(file: str) -> None:
    """Count the quads of FILE, in total and per graph.

    Example:
      rdfquads stats data.nq
    """
    try:
        with _open_decoder(file) as decoder:
            counts = count_by_graph(decoder)
    except (NQuadsError, OSError) as e:
        click.echo(f"Error: {e}", err=True)
        raise click.Abort()

    total = sum(counts.values())
    click.echo(f"Total quads: {total}")
    click.echo(f"Graphs: {len(counts)}")
    click.echo("=" * 60)
    for graph, count in sorted(counts.items(), key=lambda x: x[1], reverse=True):
        click.echo(f"{count}  {graph}")


@main.command()
@click.argument("file", type=FILE_ARGUMENT)
@click.option(
    "--format",
    "rdf_format",
    type=click.Choice(["trig", "nquads", "json-ld"]),
    default="trig",
    help="RDF serialization written by rdflib (default: trig)",
)
@click.option("--output", "-o", help="Output file (prints to console if omitted)")
def export(file: str, rdf_format: str, output: Optional[str]) -> None:
    """Load FILE into an rdflib Dataset and serialize it.

    Example:
      rdfquads export data.nq --format trig --output data.trig
    """
    from rdflib import Dataset

    dataset = Dataset()
    try:
        with _open_decoder(file) as decoder:
            count = add_quads(dataset, decoder)
    except (NQuadsError, OSError) as e:
        click.echo(f"Error: {e}", err=True)
        raise click.Abort()

    if output:
        dataset.serialize(destination=output, format=rdf_format)
        click.echo(f"OK Exported {count} quads to {output}", err=True)
    else:
        click.echo(dataset.serialize(format=rdf_format), nl=False)


if __name__ == "__main__":
    main()
