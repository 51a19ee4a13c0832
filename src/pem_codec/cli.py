"""
Command line entry point — a thin typer wrapper around the codec.

    pem-codec inspect bundle.pem [--json]   list the blocks parse_many finds
    pem-codec check key.pem                 parse the first block, report the failure kind
    pem-codec normalize bundle.pem [--lf]   re-encode every block in canonical form

PATH may be "-" for stdin. Exit codes: 0 ok, 1 nothing usable decoded,
2 configuration or input error.
"""

import json
from pathlib import Path
from typing import Annotated, NoReturn

import structlog
import typer
from pydantic import ValidationError

from pem_codec.codec import encode_many, parse, parse_many
from pem_codec.config import CodecSettings
from pem_codec.domain.models import EncodeConfig, LineEnding
from pem_codec.log_config import configure_structlog

log = structlog.get_logger()

app = typer.Typer(
    name="pem-codec",
    help="Parse and encode PEM-encoded data.",
    no_args_is_help=True,
    add_completion=False,
)

PathArg = Annotated[str, typer.Argument(help="PEM file to read, or - for stdin.")]


@app.callback()
def main(ctx: typer.Context) -> None:
    """Load settings and configure logging before any command runs."""
    try:
        settings = CodecSettings()
    except ValidationError as e:
        typer.echo(f"Configuration error: {e}", err=True)
        raise typer.Exit(code=2) from e

    configure_structlog(settings.log_level)
    ctx.obj = settings


def _reject_oversized(limit: int) -> NoReturn:
    typer.echo(f"Input exceeds max_input_bytes ({limit})", err=True)
    raise typer.Exit(code=2)


def _read_input(path: str, limit: int) -> bytes:
    if path == "-":
        data = typer.get_binary_stream("stdin").read(limit + 1)
        if len(data) > limit:
            _reject_oversized(limit)
        return data

    file = Path(path)
    try:
        if file.stat().st_size > limit:
            _reject_oversized(limit)
        return file.read_bytes()
    except OSError as e:
        typer.echo(f"Cannot read {path}: {e.strerror or e}", err=True)
        raise typer.Exit(code=2) from e


@app.command()
def inspect(
    ctx: typer.Context,
    path: PathArg,
    as_json: Annotated[bool, typer.Option("--json", help="Emit a JSON array.")] = False,
) -> None:
    """List every decodable PEM block with its tag and payload size."""
    settings: CodecSettings = ctx.obj
    pems = parse_many(_read_input(path, settings.max_input_bytes))
    log.info("cli.inspect", path=path, blocks=len(pems))

    rows = [
        {"index": i, "tag": pem.tag, "length": len(pem.contents)}
        for i, pem in enumerate(pems)
    ]
    if as_json:
        typer.echo(json.dumps(rows))
    else:
        for row in rows:
            typer.echo(f"{row['index']}\t{row['tag']}\t{row['length']}")

    if not pems:
        raise typer.Exit(code=1)


@app.command()
def check(ctx: typer.Context, path: PathArg) -> None:
    """Parse the first PEM block; print its tag or the reason it was rejected."""
    settings: CodecSettings = ctx.obj
    result = parse(_read_input(path, settings.max_input_bytes))

    if result.is_failure():
        failure = result.error()
        log.info("cli.check_failed", path=path, kind=failure.kind.value)
        typer.echo(str(failure), err=True)
        raise typer.Exit(code=1)

    pem = result.value()
    typer.echo(f"{pem.tag}\t{len(pem.contents)}")


@app.command()
def normalize(
    ctx: typer.Context,
    path: PathArg,
    lf: Annotated[bool, typer.Option("--lf", help="Use LF instead of CRLF line endings.")] = False,
) -> None:
    """Re-encode every decodable block in canonical form to stdout."""
    settings: CodecSettings = ctx.obj
    config = settings.encode.to_encode_config()
    if lf:
        config = EncodeConfig(line_ending=LineEnding.LF, line_wrap=config.line_wrap)

    pems = parse_many(_read_input(path, settings.max_input_bytes))
    log.info("cli.normalize", path=path, blocks=len(pems), line_wrap=config.line_wrap)
    if not pems:
        typer.echo("No PEM blocks found", err=True)
        raise typer.Exit(code=1)

    stdout = typer.get_binary_stream("stdout")
    stdout.write(encode_many(pems, config).encode("utf-8"))
    stdout.flush()


if __name__ == "__main__":
    app()
