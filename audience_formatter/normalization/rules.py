"""Table-driven rewrite rules shared by the address and state normalizers.

Two kinds of rule exist:

* character rules: every occurrence of the key is replaced, wherever it
  appears (diacritic folding, delimiters);
* word rules: the key is replaced only as a whole word, i.e. between
  ``\\b`` boundaries, so "east" rewrites "123 east st" but not "eastwood".

Entries are applied one at a time in table order, so an earlier entry's
output can be rewritten by a later one.  Keys are escaped before being
compiled; matching is case-sensitive and expects lowercased text.
"""
from __future__ import annotations

import re
from collections.abc import Mapping
from functools import lru_cache


@lru_cache(maxsize=4096)
def word_pattern(word: str) -> re.Pattern[str]:
    """Return the compiled whole-word pattern for *word*."""
    return re.compile(r"\b" + re.escape(word) + r"\b")


def replace_chars(text: str, table: Mapping[str, str]) -> str:
    for char, replacement in table.items():
        text = text.replace(char, replacement)
    return text


def replace_words(text: str, table: Mapping[str, str]) -> str:
    for word, replacement in table.items():
        if not word:
            continue
        # Function replacement so table values are never read as backreferences.
        text = word_pattern(word).sub(lambda _m, r=replacement: r, text)
    return text
