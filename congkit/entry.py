"""
Table entries, category filters and code scheme versions.

Every character in the table belongs to one or more categories (Chinese,
Big5, HKSCS, ...). A CongkitFilter selects categories; an entry is kept when
any of its categories is selected.
"""

from dataclasses import dataclass, fields
from enum import Enum, Flag


# ============================================================================
# Categories
# ============================================================================

class Category(Flag):
    """Character categories, in the column order of the text table."""
    CHINESE = 1 << 0
    BIG5 = 1 << 1
    HKSCS = 1 << 2
    TAIWANESE = 1 << 3
    KANJI = 1 << 4
    HIRAGANA = 1 << 5
    KATAKANA = 1 << 6
    PUNCTUATION = 1 << 7
    MISC = 1 << 8


# Flag attribute names shared by Entry and CongkitFilter
CATEGORY_FIELDS = (
    'chinese', 'big5', 'hkscs', 'taiwanese',
    'kanji', 'hiragana', 'katakana', 'punctuation', 'misc',
)

_FIELD_CATEGORIES = tuple(Category[name.upper()] for name in CATEGORY_FIELDS)

NO_CATEGORY = Category(0)
ALL_CATEGORIES = Category(sum(c.value for c in _FIELD_CATEGORIES))


def _categories_of(obj) -> Category:
    result = NO_CATEGORY
    for name, category in zip(CATEGORY_FIELDS, _FIELD_CATEGORIES):
        if getattr(obj, name):
            result |= category
    return result


def _flags_from(categories: Category) -> dict:
    return {
        name: bool(categories & category)
        for name, category in zip(CATEGORY_FIELDS, _FIELD_CATEGORIES)
    }


# ============================================================================
# Code Scheme Version
# ============================================================================

class CongkitVersion(Enum):
    """Which code scheme becomes the active code of a table."""
    V3 = "v3"
    V5 = "v5"


# ============================================================================
# Entry
# ============================================================================

@dataclass(frozen=True, slots=True)
class Entry:
    """
    One character of the code table.

    Attributes:
        traditional: The character this entry describes (table key)
        simplified: Simplified form of the character
        chinese ... misc: Category flags
        v3: Cangjie 3 code
        v5: Cangjie 5 code
        code: Active code for the table's version ("" until bound)
        shortcut: Abbreviated code
        order: Display order, lower sorts first
    """
    traditional: str
    simplified: str
    chinese: bool
    big5: bool
    hkscs: bool
    taiwanese: bool
    kanji: bool
    hiragana: bool
    katakana: bool
    punctuation: bool
    misc: bool
    v3: str
    v5: str
    code: str
    shortcut: str
    order: int

    @classmethod
    def from_categories(cls, traditional: str, simplified: str, categories: Category,
                        v3: str, v5: str, code: str, shortcut: str, order: int) -> "Entry":
        return cls(
            traditional=traditional,
            simplified=simplified,
            v3=v3,
            v5=v5,
            code=code,
            shortcut=shortcut,
            order=order,
            **_flags_from(categories),
        )

    @property
    def categories(self) -> Category:
        """The union of this entry's true flags."""
        return _categories_of(self)

    def code_for(self, version: CongkitVersion) -> str:
        """Get the code of this entry under a scheme version."""
        if version is CongkitVersion.V5:
            return self.v5
        return self.v3


# ============================================================================
# Filter
# ============================================================================

@dataclass(frozen=True)
class CongkitFilter:
    """
    Category selection used when loading a table.

    The defaults select Chinese characters, so CongkitFilter() equals
    CongkitFilter.for_chinese() and custom filters only need to name the
    flags that differ from it.
    """
    chinese: bool = True
    big5: bool = True
    hkscs: bool = True
    taiwanese: bool = True
    kanji: bool = False
    hiragana: bool = False
    katakana: bool = False
    punctuation: bool = False
    misc: bool = False

    @classmethod
    def for_all(cls) -> "CongkitFilter":
        return cls.from_categories(ALL_CATEGORIES)

    @classmethod
    def for_chinese(cls) -> "CongkitFilter":
        return cls()

    @classmethod
    def for_japanese(cls) -> "CongkitFilter":
        return cls.from_categories(Category.KANJI | Category.HIRAGANA | Category.KATAKANA)

    @classmethod
    def from_categories(cls, categories: Category) -> "CongkitFilter":
        return cls(**_flags_from(categories))

    @property
    def categories(self) -> Category:
        """The selected categories as a flag set."""
        return _categories_of(self)

    def __str__(self) -> str:
        selected = [f.name for f in fields(self) if getattr(self, f.name)]
        return ",".join(selected) or "none"


FILTER_PRESETS = {
    'all': CongkitFilter.for_all,
    'chinese': CongkitFilter.for_chinese,
    'japanese': CongkitFilter.for_japanese,
}


def passes(entry: Entry, filter: CongkitFilter) -> bool:
    """True if any category of the entry is selected by the filter."""
    return bool(entry.categories & filter.categories)
