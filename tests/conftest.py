from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Make package importable when running tests from the repository root.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from congkit import CongkitDB, CongkitFilter, CongkitVersion, encode_entries, to_entries

# traditional simplified chinese big5 hkscs taiwanese kanji hiragana katakana
# punctuation misc v3 v5 shortcut order
SAMPLE_TABLE = """\
# congkit sample table
# trad simp chinese big5 hkscs taiwanese kanji hiragana katakana punctuation misc v3 v5 shortcut order

日 日 1 1 0 1 1 0 0 0 0 a a a 1
我 我 1 1 0 1 1 0 0 0 0 hqi hqi hi 10
你 你 1 1 0 1 0 0 0 0 0 onf onf of 20
們 们 1 1 0 1 0 0 0 0 0 oan oan on 25
佢 佢 1 0 1 0 0 0 0 0 0 osls osls os 30
偽 伪 1 1 0 1 0 0 0 0 0 oikf oikf of 35
寫 写 1 1 0 1 1 0 0 0 0 jhxf jhxf jf 40
兼 兼 1 1 0 1 1 0 0 0 0 tcxo txc to 50
あ あ 0 0 0 0 0 1 0 0 0 nau nau nu 100
ア ア 0 0 0 0 0 0 1 0 0 nau nau nu 101
、 、 0 0 0 0 0 0 0 1 0 zxaa zxaa za 200
"""

CHINESE_CHARS = set("日我你們佢偽寫兼")
JAPANESE_CHARS = set("日我寫兼あア")
ALL_CHARS = CHINESE_CHARS | set("あア、")


@pytest.fixture
def table_text() -> str:
    return SAMPLE_TABLE


@pytest.fixture
def db() -> CongkitDB:
    return CongkitDB.from_txt(SAMPLE_TABLE, CongkitVersion.V3, CongkitFilter.for_chinese())


@pytest.fixture
def db_all() -> CongkitDB:
    return CongkitDB.from_txt(SAMPLE_TABLE, CongkitVersion.V3, CongkitFilter.for_all())


@pytest.fixture
def full_data() -> bytes:
    return encode_entries(to_entries(SAMPLE_TABLE, CongkitFilter.for_all()))
