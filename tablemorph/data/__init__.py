"""Data loading for tablemorph."""

from tablemorph.data.dictionary import open_dictionary, strip_line_terminator
from tablemorph.data.table import (
    SubstitutionTable,
    TableLineError,
    decode_hex_notation,
    load_substitution_tables,
    parse_table_line,
    parse_table_lines,
    read_substitution_table,
)

__all__ = [
    "SubstitutionTable",
    "TableLineError",
    "decode_hex_notation",
    "load_substitution_tables",
    "open_dictionary",
    "parse_table_line",
    "parse_table_lines",
    "read_substitution_table",
    "strip_line_terminator",
]
