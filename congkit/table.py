"""
Code table parsing and binary serialization.

The text table is the system of record: one character per line, 15
space-separated fields:

    traditional simplified chinese big5 hkscs taiwanese kanji hiragana
    katakana punctuation misc v3 v5 shortcut order

Lines starting with "# " and empty lines are skipped. Flags are "1" for
true and anything else for false.

The binary table is a compact cache of a parsed entry list, written by
`python -m congkit.build` and read back with decode_entries().
"""

import logging
import re
import struct
from typing import Iterable, List, Optional, Tuple

from congkit.entry import ALL_CATEGORIES, Category, CongkitFilter, Entry, passes
from congkit.errors import DecodeError, ParseError

logger = logging.getLogger(__name__)


# ============================================================================
# Text Table
# ============================================================================

FIELD_COUNT = 15
COMMENT_PREFIX = "# "

ORDER_MIN = -(1 << 31)
ORDER_MAX = (1 << 31) - 1
ORDER_PATTERN = re.compile(r"[+-]?[0-9]+")


def _parse_char(field: str, name: str, lineno: Optional[int], line: str) -> str:
    if len(field) != 1:
        raise ParseError(f"{name} must be a single character, got {field!r}", lineno, line)
    return field


def _parse_order(field: str, lineno: Optional[int], line: str) -> int:
    if not ORDER_PATTERN.fullmatch(field):
        raise ParseError(f"order must be an integer, got {field!r}", lineno, line)
    order = int(field)
    if not ORDER_MIN <= order <= ORDER_MAX:
        raise ParseError(f"order {order} does not fit in 32 bits", lineno, line)
    return order


def parse_line(line: str, lineno: Optional[int] = None) -> Entry:
    """
    Parse one record of the text table.

    Args:
        line: The record, without its line terminator
        lineno: 1-based line number used in error messages

    Returns:
        An Entry with an empty active code

    Raises:
        ParseError: If the line does not have exactly 15 valid fields
    """
    fields = line.split(' ')
    if len(fields) != FIELD_COUNT:
        raise ParseError(f"expected {FIELD_COUNT} fields, got {len(fields)}", lineno, line)

    traditional = _parse_char(fields[0], "traditional", lineno, line)
    simplified = _parse_char(fields[1], "simplified", lineno, line)
    flags = [f == "1" for f in fields[2:11]]
    v3, v5, shortcut = fields[11], fields[12], fields[13]
    order = _parse_order(fields[14], lineno, line)

    return Entry(traditional, simplified, *flags, v3, v5, "", shortcut, order)


def to_entries(text: str, filter: Optional[CongkitFilter] = None) -> List[Entry]:
    """
    Parse a text table and keep the entries that pass the filter.

    Args:
        text: Full contents of the text table
        filter: Category filter (default: CongkitFilter(), Chinese characters)

    Returns:
        Entries in table order, active code left empty

    Raises:
        ParseError: On the first malformed line
    """
    if filter is None:
        filter = CongkitFilter()

    entries = []
    parsed = 0
    for lineno, line in enumerate(text.split('\n'), start=1):
        line = line.rstrip('\r')
        if not line or line.startswith(COMMENT_PREFIX):
            continue
        entry = parse_line(line, lineno)
        parsed += 1
        if passes(entry, filter):
            entries.append(entry)

    logger.debug("Parsed %d table lines, kept %d (filter: %s)", parsed, len(entries), filter)
    return entries


# ============================================================================
# Binary Table
# ============================================================================
# Layout (little-endian):
#   count: uint32
#   then for each entry:
#     traditional, simplified: uint32 code points
#     categories: uint16 bitmask (Category values)
#     v3, v5, code, shortcut: uint16 byte length + UTF-8 bytes each
#     order: int32

COUNT_FORMAT = "<I"
HEAD_FORMAT = "<IIH"
TEXT_LEN_FORMAT = "<H"
ORDER_FORMAT = "<i"

COUNT_SIZE = struct.calcsize(COUNT_FORMAT)
HEAD_SIZE = struct.calcsize(HEAD_FORMAT)
TEXT_LEN_SIZE = struct.calcsize(TEXT_LEN_FORMAT)
ORDER_SIZE = struct.calcsize(ORDER_FORMAT)

MAX_CODEPOINT = 0x10FFFF


def _pack_text(text: str) -> bytes:
    data = text.encode('utf-8')
    return struct.pack(TEXT_LEN_FORMAT, len(data)) + data


def encode_entries(entries: Iterable[Entry]) -> bytes:
    """
    Serialize entries to the binary table format.

    The output depends only on the entries and their order.

    Raises:
        ValueError: If a field does not fit the format (multi-character
            key, text over 65535 bytes, order outside 32 bits)
    """
    entries = list(entries)
    chunks = [struct.pack(COUNT_FORMAT, len(entries))]
    for entry in entries:
        try:
            chunks.append(struct.pack(
                HEAD_FORMAT,
                ord(entry.traditional),
                ord(entry.simplified),
                entry.categories.value,
            ))
            for text in (entry.v3, entry.v5, entry.code, entry.shortcut):
                chunks.append(_pack_text(text))
            chunks.append(struct.pack(ORDER_FORMAT, entry.order))
        except (struct.error, TypeError) as e:
            raise ValueError(f"Cannot encode entry {entry.traditional!r}: {e}") from e
    return b"".join(chunks)


class _Reader:
    """Sequential reader over a binary table."""

    def __init__(self, data: bytes):
        self.data = memoryview(data)
        self.pos = 0

    def take(self, size: int) -> memoryview:
        end = self.pos + size
        if end > len(self.data):
            raise DecodeError(f"Unexpected end of data at offset {self.pos}")
        chunk = self.data[self.pos:end]
        self.pos = end
        return chunk

    def unpack(self, fmt: str, size: int) -> Tuple:
        return struct.unpack(fmt, self.take(size))

    def text(self) -> str:
        (length,) = self.unpack(TEXT_LEN_FORMAT, TEXT_LEN_SIZE)
        offset = self.pos
        try:
            return bytes(self.take(length)).decode('utf-8')
        except UnicodeDecodeError as e:
            raise DecodeError(f"Invalid UTF-8 at offset {offset}: {e}") from e

    def char(self, codepoint: int) -> str:
        if codepoint > MAX_CODEPOINT or 0xD800 <= codepoint <= 0xDFFF:
            raise DecodeError(f"Invalid code point {codepoint:#x} before offset {self.pos}")
        return chr(codepoint)


def decode_entries(data: bytes) -> List[Entry]:
    """
    Deserialize a binary table produced by encode_entries().

    Raises:
        DecodeError: If the data is truncated, has trailing bytes, or holds
            invalid characters
    """
    reader = _Reader(data)
    (count,) = reader.unpack(COUNT_FORMAT, COUNT_SIZE)

    entries = []
    for _ in range(count):
        traditional, simplified, mask = reader.unpack(HEAD_FORMAT, HEAD_SIZE)
        if mask & ~ALL_CATEGORIES.value:
            raise DecodeError(f"Invalid category mask {mask:#x}")
        categories = Category(mask)
        traditional = reader.char(traditional)
        simplified = reader.char(simplified)
        v3, v5, code, shortcut = (reader.text() for _ in range(4))
        (order,) = reader.unpack(ORDER_FORMAT, ORDER_SIZE)
        entries.append(Entry.from_categories(
            traditional, simplified, categories, v3, v5, code, shortcut, order,
        ))

    if reader.pos != len(reader.data):
        raise DecodeError(f"{len(reader.data) - reader.pos} trailing bytes after {count} entries")

    logger.debug("Decoded %d entries from %d bytes", count, len(reader.data))
    return entries
