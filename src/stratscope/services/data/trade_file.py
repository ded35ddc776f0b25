"""Trade dataset file codec.

Plain-text format, one row per line:

    profit,duration;profit,duration;...;

Every trade (including the last) is terminated by ';'. An empty row is an
empty line. Numbers are written in %g style with 6 significant digits by
default, so a written file is a lossy rendering of the generated values.

Reading accepts the same format: segments are split on ';', empty segments
are skipped, and each segment must be exactly two numbers separated by ','.
"""

from pathlib import Path
from typing import Iterable

from stratscope.libraries.performance.models import Trade, TradeRow
from stratscope.system import LoggerFactory

logger = LoggerFactory.get_logger()

TRADE_SEPARATOR = ";"
FIELD_SEPARATOR = ","


class TradeFileError(Exception):
    """Raised when a dataset file cannot be opened, written or read."""

    pass


class TradeFileFormatError(TradeFileError):
    """Raised when dataset file content does not follow the profit,duration; format."""

    def __init__(self, message: str, line_number: int | None = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


def _format_number(value: float, precision: int) -> str:
    return f"{value:.{precision}g}"


def format_row(row: TradeRow, precision: int = 6) -> str:
    """
    Render a row as 'profit,duration;' segments (no trailing newline).

    Example:
        >>> format_row([Trade(profit=-50, duration=20), Trade(profit=10.5, duration=30)])
        '-50,20;10.5,30;'
    """
    return "".join(
        f"{_format_number(trade.profit, precision)}{FIELD_SEPARATOR}"
        f"{_format_number(trade.duration, precision)}{TRADE_SEPARATOR}"
        for trade in row
    )


def write_trade_file(path: Path | str, rows: Iterable[TradeRow], precision: int = 6) -> int:
    """
    Write rows to a dataset file, one line per row.

    Args:
        path: Output file path (overwritten)
        rows: Trade rows in output order
        precision: Significant digits per number

    Returns:
        Number of rows written

    Raises:
        TradeFileError: If the file cannot be opened or written
    """
    file_path = Path(path)
    count = 0
    try:
        with file_path.open("w", encoding="utf-8", newline="\n") as f:
            for row in rows:
                f.write(format_row(row, precision))
                f.write("\n")
                count += 1
    except OSError as e:
        logger.error("trade_file.write_failed", path=str(file_path), error=str(e))
        raise TradeFileError(f"Could not open file {file_path} for writing.") from e

    logger.info("trade_file.written", path=str(file_path), rows=count)
    return count


def parse_row(line: str, line_number: int | None = None) -> list[Trade]:
    """
    Parse one dataset line into trades.

    Args:
        line: Line content (trailing newline allowed)
        line_number: Used in error messages only

    Raises:
        TradeFileFormatError: If a segment is not 'profit,duration'
    """
    trades: list[Trade] = []
    for segment in line.strip().split(TRADE_SEPARATOR):
        segment = segment.strip()
        if not segment:
            continue

        fields = segment.split(FIELD_SEPARATOR)
        if len(fields) != 2:
            raise TradeFileFormatError(f"expected 'profit,duration', got {segment!r}", line_number)

        try:
            profit = float(fields[0])
            duration = float(fields[1])
        except ValueError:
            raise TradeFileFormatError(f"non-numeric trade {segment!r}", line_number) from None

        trades.append(Trade(profit=profit, duration=duration))

    return trades


def read_trade_file(path: Path | str) -> list[list[Trade]]:
    """
    Read all rows from a dataset file.

    Raises:
        TradeFileError: If the file cannot be opened
        TradeFileFormatError: If any line is malformed or not UTF-8 text
    """
    file_path = Path(path)
    rows: list[list[Trade]] = []
    try:
        with file_path.open("r", encoding="utf-8") as f:
            for line_number, line in enumerate(f, start=1):
                rows.append(parse_row(line, line_number))
    except OSError as e:
        logger.error("trade_file.read_failed", path=str(file_path), error=str(e))
        raise TradeFileError(f"Could not open file {file_path} for reading.") from e
    except UnicodeDecodeError as e:
        logger.error("trade_file.decode_failed", path=str(file_path), error=str(e))
        raise TradeFileFormatError(f"{file_path} is not UTF-8 text") from e

    logger.info("trade_file.read", path=str(file_path), rows=len(rows))
    return rows
