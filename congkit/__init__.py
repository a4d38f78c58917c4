"""
congkit: Cangjie code table lookups

Looks up the Cangjie input code of a character, the characters typed by a
code pattern, and the radicals spelled by a code.

Basic Usage:
    import congkit

    db = congkit.load_table("data/table.txt")
    db.get_code("我")              # 'hqi'
    db.get_characters("onf*")      # characters whose code starts with onf
    db.get_radicals("hqi")         # '竹手戈'
"""

from pathlib import Path
from typing import Optional, Union

from congkit.db import CongkitDB
from congkit.entry import Category, CongkitFilter, CongkitVersion, Entry, passes
from congkit.errors import CongkitError, DecodeError, ParseError, PatternError
from congkit.table import decode_entries, encode_entries, to_entries

__version__ = "0.1.0"

TEXT_SUFFIX = ".txt"


def get_default_table_path() -> Path:
    """Get the default text table path."""
    return Path("data") / "table.txt"


def load_table(
    path: Optional[Union[str, Path]] = None,
    version: CongkitVersion = CongkitVersion.V3,
    filter: Optional[CongkitFilter] = None,
) -> CongkitDB:
    """
    Load a code table file.

    Files ending in .txt are read as text tables, anything else as binary
    tables written by `python -m congkit.build`.

    Args:
        path: Table file. Uses data/table.txt if not specified.
        version: Code scheme to bind
        filter: Category filter (default: Chinese characters)

    Returns:
        The loaded CongkitDB

    Raises:
        FileNotFoundError: If the table file doesn't exist
        ParseError: If the text table is malformed
        DecodeError: If the binary table is invalid
    """
    if path is None:
        path = get_default_table_path()
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(
            f"Table not found at {path}. "
            "Pass a text table, or run 'python -m congkit.build' to build a binary one."
        )

    if path.suffix == TEXT_SUFFIX:
        return CongkitDB.from_txt(path.read_text(encoding='utf-8'), version, filter)
    return CongkitDB.from_data(path.read_bytes(), version, filter)


def get_version() -> str:
    """Get the library version."""
    return __version__


__all__ = [
    # Query engine
    "CongkitDB",
    "load_table",
    # Data model
    "Category",
    "CongkitFilter",
    "CongkitVersion",
    "Entry",
    "passes",
    # Table formats
    "to_entries",
    "encode_entries",
    "decode_entries",
    # Exceptions
    "CongkitError",
    "ParseError",
    "DecodeError",
    "PatternError",
    # Version
    "get_version",
    "__version__",
]
