"""filesplitter: split massive text files by lines, size, or pattern."""
from .constants import BUF_SIZE, TIMESTAMP_FORMAT
from .engine import PartState, SplitConfig, SplitResult, Splitter, part_path, split_file, split_stream
from .errors import PartCreateError, SizeParseError, SplitterError
from .logging_setup import init_logger
from .sizes import format_size, parse_size

__version__ = "1.0.0"
