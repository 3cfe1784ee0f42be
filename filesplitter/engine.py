"""
engine.py

Streaming line splitter. Reads an input stream once, line by line, and routes
each line into numbered part files, rolling over to a new part when a line
count, a byte size or a regex match says so.

A rollover always happens *before* the triggering line is written, so that
line becomes the first line of the new part. Lines are never split: one line
larger than the size limit still lands whole in its own part.
"""
from __future__ import annotations
import re
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import BinaryIO, Callable, Optional

from .ansi import err, info
from .constants import BUF_SIZE, DEFAULT_EXT, DEFAULT_PAD, DEFAULT_PREFIX, TIMESTAMP_FORMAT
from .errors import PartCreateError
from .logging_setup import log_debug, log_error, log_info, log_timing


@dataclass(frozen=True)
class SplitConfig:
    max_lines: int = 0
    max_bytes: int = 0
    pattern: Optional[re.Pattern[str]] = None
    outdir: Path = Path(".")
    prefix: str = DEFAULT_PREFIX
    ext: str = DEFAULT_EXT
    pad: int = DEFAULT_PAD
    timestamp: bool = False
    dry_run: bool = False
    quiet: bool = False


@dataclass
class PartState:
    index: int = 0
    lines: int = 0
    size: int = 0
    handle: Optional[BinaryIO] = None
    path: Optional[Path] = None


@dataclass
class SplitResult:
    parts: list[Path] = field(default_factory=list)
    lines: int = 0
    bytes: int = 0
    read_error: Optional[str] = None

    @property
    def part_count(self) -> int:
        return len(self.parts)


def part_path(config: SplitConfig, index: int, now: Optional[datetime] = None) -> Path:
    """Build the path of part ``index``: {prefix}{index}[_{timestamp}].{ext}.

    Args:
        config: Naming parameters (outdir, prefix, ext, pad, timestamp)
        index: 1-based part index, zero-padded to ``config.pad`` digits
        now: Creation time; only used when ``config.timestamp`` is set

    Returns:
        Path under ``config.outdir``
    """
    suffix = str(index).zfill(config.pad)
    if config.timestamp:
        suffix = f"{suffix}_{(now or datetime.now()).strftime(TIMESTAMP_FORMAT)}"
    return config.outdir / f"{config.prefix}{suffix}.{config.ext}"


class Splitter:
    """Single-pass splitter owning the current part for the length of a run."""

    def __init__(self, config: SplitConfig, clock: Callable[[], datetime] = datetime.now):
        self.config = config
        self.clock = clock
        self.state = PartState()
        self.result = SplitResult()

    def boundary_reason(self, line: bytes) -> Optional[str]:
        """Return why ``line`` must start a new part, or None to keep the current one.

        Checks run against the current part's totals in the order lines, size,
        pattern. An empty part is never rolled over, so the first input line
        always stays in part 1.
        """
        cfg, st = self.config, self.state
        if st.lines == 0:
            return None
        if cfg.max_lines > 0 and st.lines >= cfg.max_lines:
            return "lines"
        if cfg.max_bytes > 0 and st.size + len(line) > cfg.max_bytes:
            return "size"
        if cfg.pattern is not None and cfg.pattern.search(line.decode("utf-8", errors="replace")):
            return "pattern"
        return None

    def _close_part(self) -> None:
        if self.state.handle is not None:
            self.state.handle.flush()
            self.state.handle.close()
            self.state.handle = None

    def rollover(self, reason: str = "start") -> Path:
        """Close the current part and open the next one.

        Raises:
            PartCreateError: If the new part (or the output directory) cannot
                be created. The previous part is already closed at that point.
        """
        cfg, st = self.config, self.state
        self._close_part()
        index = st.index + 1
        path = part_path(cfg, index, self.clock())
        if cfg.dry_run:
            info(f"[DryRun] Would create: {path}", cfg.quiet)
        else:
            try:
                if index == 1:
                    cfg.outdir.mkdir(parents=True, exist_ok=True)
                st.handle = open(path, "wb", buffering=BUF_SIZE)
            except OSError as e:
                log_error(f"Failed to create part {index} at {path}: {e}")
                raise PartCreateError(path, e) from e
            info(f"✂️  Creating: {path}", cfg.quiet)
        log_debug(f"part {index} -> {path} (reason: {reason})")
        st.index = index
        st.path = path
        st.lines = 0
        st.size = 0
        self.result.parts.append(path)
        return path

    def write(self, line: bytes) -> None:
        if self.state.handle is not None:
            self.state.handle.write(line)
        self.state.lines += 1
        self.state.size += len(line)
        self.result.lines += 1
        self.result.bytes += len(line)

    def run(self, stream: BinaryIO) -> SplitResult:
        """Split ``stream`` into parts and return what was produced.

        A final line without a trailing newline goes through the same
        threshold checks as every other line, so it may start a new part.
        A read error stops the loop early: it is logged, the open part is
        still flushed and closed, and the error message is kept on the result.
        """
        try:
            self.rollover()
            while True:
                try:
                    line = stream.readline()
                except OSError as e:
                    err(f"Error reading line: {e}")
                    log_error(f"Read error after {self.result.lines} line(s): {e}")
                    self.result.read_error = str(e)
                    break
                if not line:
                    break
                reason = self.boundary_reason(line)
                if reason is not None:
                    self.rollover(reason)
                self.write(line)
        finally:
            self._close_part()
        log_info(
            f"Split {self.result.lines} line(s), {self.result.bytes} byte(s) "
            f"into {self.result.part_count} part(s)"
        )
        return self.result


@log_timing
def split_stream(stream: BinaryIO, config: SplitConfig,
                 clock: Callable[[], datetime] = datetime.now) -> SplitResult:
    return Splitter(config, clock=clock).run(stream)


def split_file(input_path: Path, config: SplitConfig,
               clock: Callable[[], datetime] = datetime.now) -> SplitResult:
    """Open ``input_path`` with a large read buffer and split it.

    Raises:
        OSError: If the input file cannot be opened.
        PartCreateError: If an output part cannot be created.
    """
    with open(input_path, "rb", buffering=BUF_SIZE) as inp:
        return split_stream(inp, config, clock=clock)
