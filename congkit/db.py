"""
Query engine for a loaded code table.

A CongkitDB is built once from a text table, a binary table or a list of
entries, for one code scheme version and one category filter. It is never
modified afterwards; loading another version or filter means building a
new CongkitDB.
"""

import logging
import re
from dataclasses import replace
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional

from congkit.entry import CongkitFilter, CongkitVersion, Entry, passes
from congkit.errors import PatternError
from congkit.radicals import KEYS, RADICALS
from congkit.table import decode_entries, to_entries

logger = logging.getLogger(__name__)

WILDCARD = '*'


def compile_pattern(pattern: str) -> re.Pattern:
    """
    Compile a code pattern to an anchored regex.

    Every character matches itself except '*', which matches one or more
    arbitrary characters. The empty pattern matches only an empty code.

    Raises:
        PatternError: If the pattern cannot be compiled
    """
    if not isinstance(pattern, str):
        raise PatternError(f"pattern must be a string, got {type(pattern).__name__}")

    regex = '.+'.join(re.escape(part) for part in pattern.split(WILDCARD))
    try:
        return re.compile(regex, re.DOTALL)
    except re.error as e:
        raise PatternError(f"invalid pattern {pattern!r}: {e}") from e


def _display_key(entry: Entry):
    return entry.order, entry.traditional


class CongkitDB:
    """
    An indexed, read-only code table.

    Attributes:
        version: The code scheme bound as each entry's active code
        entries: Read-only mapping of character -> Entry
        radicals: Read-only mapping of radical -> key
    """

    def __init__(
        self,
        entries: Optional[Mapping[str, Entry]] = None,
        version: CongkitVersion = CongkitVersion.V3,
    ):
        self._entries = MappingProxyType(dict(entries or {}))
        self._version = version
        self._radicals = RADICALS
        self._keys = KEYS

    def __repr__(self) -> str:
        return f"CongkitDB({len(self._entries)} entries, version={self._version.value})"

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, character: str) -> bool:
        return character in self._entries

    @property
    def version(self) -> CongkitVersion:
        return self._version

    @property
    def entries(self) -> Mapping[str, Entry]:
        return self._entries

    @property
    def radicals(self) -> Mapping[str, str]:
        return self._radicals

    # ------------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------------

    @classmethod
    def from_entries(
        cls,
        entries: Iterable[Entry],
        version: CongkitVersion = CongkitVersion.V3,
    ) -> "CongkitDB":
        """
        Bind each entry's active code to the version and index by character.

        A character that appears more than once keeps its last entry.
        """
        indexed: Dict[str, Entry] = {}
        overwritten = 0
        for entry in entries:
            if entry.traditional in indexed:
                overwritten += 1
            indexed[entry.traditional] = replace(entry, code=entry.code_for(version))

        if overwritten:
            logger.debug("%d duplicate characters replaced by later entries", overwritten)
        return cls(indexed, version)

    @classmethod
    def from_txt(
        cls,
        text: str,
        version: CongkitVersion = CongkitVersion.V3,
        filter: Optional[CongkitFilter] = None,
    ) -> "CongkitDB":
        """
        Build from a text table.

        Raises:
            ParseError: If any line of the table is malformed
        """
        return cls.from_entries(to_entries(text, filter), version)

    @classmethod
    def from_data(
        cls,
        data: bytes,
        version: CongkitVersion = CongkitVersion.V3,
        filter: Optional[CongkitFilter] = None,
    ) -> "CongkitDB":
        """
        Build from a binary table.

        Raises:
            DecodeError: If the data is not a valid binary table
        """
        if filter is None:
            filter = CongkitFilter()
        entries = [e for e in decode_entries(data) if passes(e, filter)]
        return cls.from_entries(entries, version)

    to_entries = staticmethod(to_entries)

    # ------------------------------------------------------------------------
    # Radicals
    # ------------------------------------------------------------------------

    def get_radical(self, key: str) -> Optional[str]:
        """Get the radical typed by a key ('a' -> '日')."""
        return self._keys.get(key)

    def get_key(self, radical: str) -> Optional[str]:
        """Get the key that types a radical ('日' -> 'a')."""
        return self._radicals.get(radical)

    def get_radicals(self, code: str) -> str:
        """
        Render a code as radicals.

        Characters that are not keys are kept as they are:
            >>> db.get_radicals("hqi rgpd")
            '竹手戈 口土心木'
        """
        return ''.join(self._keys.get(c, c) for c in code)

    # ------------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------------

    def get_code(self, character: str) -> Optional[str]:
        """Get the active code of a character, or None if it is not in the table."""
        entry = self._entries.get(character)
        if entry is None:
            return None
        return entry.code

    def get_codes(self, characters: Iterable[str]) -> List[Optional[str]]:
        """Get the code of each character, in input order."""
        return [self.get_code(c) for c in characters]

    def get_characters(self, pattern: str) -> List[str]:
        """
        Find the characters whose code matches a pattern.

        Args:
            pattern: Code with optional '*' wildcards (one or more characters)

        Returns:
            Matching characters sorted by display order

        Raises:
            PatternError: If the pattern is invalid

        Example:
            >>> db.get_characters("onf")
            ['你']
        """
        regex = compile_pattern(pattern)
        matches = [e for e in self._entries.values() if regex.fullmatch(e.code)]
        matches.sort(key=_display_key)
        return [e.traditional for e in matches]

    def get_chars_mult(self, patterns: Iterable[str]) -> Dict[str, List[str]]:
        """
        Find the characters matching each of several patterns.

        All patterns are compiled before the table is scanned, and the table
        is scanned once for all of them. The result for each pattern equals
        get_characters(pattern).

        Raises:
            PatternError: If any pattern is invalid
        """
        regexes: Dict[str, re.Pattern] = {}
        for pattern in patterns:
            regexes.setdefault(pattern, compile_pattern(pattern))

        found: Dict[str, List[Entry]] = {p: [] for p in regexes}
        for entry in self._entries.values():
            for pattern, regex in regexes.items():
                if regex.fullmatch(entry.code):
                    found[pattern].append(entry)

        return {
            pattern: [e.traditional for e in sorted(matches, key=_display_key)]
            for pattern, matches in found.items()
        }
