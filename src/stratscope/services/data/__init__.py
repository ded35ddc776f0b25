"""Trade data: random row generation and the profit,duration; dataset file format."""

from stratscope.services.data.generator import RandomTradeSource
from stratscope.services.data.trade_file import (
    TradeFileError,
    TradeFileFormatError,
    format_row,
    parse_row,
    read_trade_file,
    write_trade_file,
)

__all__ = [
    "RandomTradeSource",
    "TradeFileError",
    "TradeFileFormatError",
    "format_row",
    "parse_row",
    "read_trade_file",
    "write_trade_file",
]
