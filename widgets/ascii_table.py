"""
ASCII table generator.
"""

from dataclasses import dataclass
from typing import List, Optional

from .config import WidgetConfig

# Names for the non-printable codes
CONTROL_NAMES = (
    "NUL", "SOH", "STX", "ETX", "EOT", "ENQ", "ACK", "BEL",
    "BS", "TAB", "LF", "VT", "FF", "CR", "SO", "SI",
    "DLE", "DC1", "DC2", "DC3", "DC4", "NAK", "SYN", "ETB",
    "CAN", "EM", "SUB", "ESC", "FS", "GS", "RS", "US",
)


@dataclass
class AsciiRow:
    decimal: int
    character: str
    hexadecimal: str
    octal: str


def display_char(code: int) -> str:
    if code < len(CONTROL_NAMES):
        return CONTROL_NAMES[code]
    if code == 32:
        return "SPACE"
    if code == 127:
        return "DEL"
    return chr(code)


def ascii_table(config: Optional[WidgetConfig] = None) -> List[AsciiRow]:
    """One row per code: decimal, character, hex and octal (lowercase, no prefix)."""
    config = config or WidgetConfig()
    return [
        AsciiRow(
            decimal=code,
            character=display_char(code),
            hexadecimal=format(code, "x"),
            octal=format(code, "o"),
        )
        for code in range(config.ASCII_FIRST, config.ASCII_LAST + 1)
    ]


def format_ascii_table(rows: List[AsciiRow]) -> str:
    lines = [f"{'Dec':>5} {'Char':<6} {'Hex':>4} {'Oct':>4}"]
    for row in rows:
        lines.append(f"{row.decimal:>5} {row.character:<6} {row.hexadecimal:>4} {row.octal:>4}")
    return "\n".join(lines)
