#!/usr/bin/env python3
"""
cli.py

Split a text file into numbered parts by line count, byte size, or regex match.
Flags keep the single-dash spelling of the original tool.

Usage examples:
  filesplitter -in usernames.txt -lines 1000000
  filesplitter -in access.log -size 100MB -outdir parts -prefix access_ -ext log
  filesplitter -in app.log -pattern '^ERROR' -ts
  # preview the part names without writing anything
  filesplitter -in big.csv -lines 50000 -dry
"""
from __future__ import annotations
import os
import re
from pathlib import Path
from typing import BinaryIO

import typer
from rich.traceback import install as rich_tb_install

from .ansi import banner, err, info, ok, warn
from .constants import BUF_SIZE, DEFAULT_EXT, DEFAULT_PAD, DEFAULT_PREFIX
from .engine import SplitConfig, split_stream
from .errors import PartCreateError, SizeParseError
from .logging_setup import init_logger, log_error, log_info
from .sizes import format_size, parse_size

app = typer.Typer(add_completion=False, help="filesplitter — split massive files by lines, size, or pattern")


@app.command(help="Split a file into parts by lines, size, or pattern.")
def split(
    input_file: str = typer.Option("", "-in", help="Input file path (e.g., usernames.txt)"),
    lines: int = typer.Option(0, "-lines", help="Split by number of lines (e.g., 1000000)"),
    size: str = typer.Option("", "-size", help="Split by max size (e.g., 100MB, 500KB)"),
    pattern: str = typer.Option("", "-pattern", help="Start a new part whenever a line matches this regex"),
    prefix: str = typer.Option(DEFAULT_PREFIX, "-prefix", help="Output filename prefix"),
    outdir: Path = typer.Option(Path("."), "-outdir", help="Output directory"),
    ext: str = typer.Option(DEFAULT_EXT, "-ext", help="Output file extension"),
    pad: int = typer.Option(DEFAULT_PAD, "-pad", help="Zero padding width for the part index"),
    timestamp: bool = typer.Option(False, "-ts", help="Add a timestamp to filenames"),
    dry_run: bool = typer.Option(False, "-dry", help="Dry run mode (preview only)"),
    quiet: bool = typer.Option(False, "-q", help="Quiet mode (suppress informational logs)"),
):
    init_logger()
    banner(quiet)

    if not input_file:
        err("Input file is required! Use -in flag.")
        raise typer.Exit(1)

    in_path = Path(input_file)
    try:
        inp = open(in_path, "rb", buffering=BUF_SIZE)
    except OSError as e:
        log_error(f"Failed to open input file {in_path}: {e}")
        err(f"Failed to open input file: {e}")
        raise typer.Exit(1)

    with inp:
        run_split(inp, in_path, lines, size, pattern, prefix, outdir, ext, pad, timestamp, dry_run, quiet)


def run_split(inp: BinaryIO, in_path: Path, lines: int, size: str, pattern: str, prefix: str, outdir: Path,
              ext: str, pad: int, timestamp: bool, dry_run: bool, quiet: bool) -> None:
    info(f"📄 Input File: {in_path} ({format_size(os.fstat(inp.fileno()).st_size)})", quiet)

    try:
        max_bytes = parse_size(size)
    except SizeParseError as e:
        warn(f"Invalid size format: {e}")
        max_bytes = 0

    compiled = None
    if pattern:
        try:
            compiled = re.compile(pattern)
        except re.error as e:
            err(f"Invalid regex pattern: {e}")
            raise typer.Exit(1)

    config = SplitConfig(
        max_lines=lines,
        max_bytes=max_bytes,
        pattern=compiled,
        outdir=outdir,
        prefix=prefix,
        ext=ext,
        pad=pad,
        timestamp=timestamp,
        dry_run=dry_run,
        quiet=quiet,
    )
    log_info(f"Splitting {in_path} with {config}")

    try:
        result = split_stream(inp, config)
    except PartCreateError as e:
        err(f"Failed to create part: {e}")
        raise typer.Exit(1)

    if dry_run:
        ok("Dry run complete.", quiet)
    else:
        ok("🎉 Done! All parts created.", quiet)
    info(f"{result.part_count} part(s), {result.lines} line(s), {result.bytes} byte(s)", quiet)


def main() -> None:
    rich_tb_install(show_locals=False)
    app()


if __name__ == "__main__":
    main()
