"""
Cangjie radicals.

Each of the 25 keys a-y stands for one radical glyph. The mapping is fixed
and does not depend on the loaded table or its version.
"""

from types import MappingProxyType
from typing import Mapping


# Radical -> key
RADICALS: Mapping[str, str] = MappingProxyType({
    '日': 'a', '月': 'b', '金': 'c', '木': 'd', '水': 'e',
    '火': 'f', '土': 'g', '竹': 'h', '戈': 'i', '十': 'j',
    '大': 'k', '中': 'l', '一': 'm', '弓': 'n', '人': 'o',
    '心': 'p', '手': 'q', '口': 'r', '尸': 's', '廿': 't',
    '山': 'u', '女': 'v', '田': 'w', '難': 'x', '卜': 'y',
})

# Key -> radical
KEYS: Mapping[str, str] = MappingProxyType({v: k for k, v in RADICALS.items()})
