"""Per code point classification and replacement lookup."""

from typing import Dict, Iterable, List, Optional, Tuple

from .tables import CATEGORY_TABLES, PLAIN_ASCII
from .types import Axis, Category, Drop, Mapping, PassThrough, Replace

TableSet = Iterable[Tuple[Category, Dict[str, Tuple[int, ...]]]]


def build_lookup(tables: TableSet) -> Dict[int, Tuple[Category, str]]:
    """Merge ordered category tables into one lookup; earlier categories win."""

    merged: Dict[int, Tuple[Category, str]] = {}
    for category, table in tables:
        for replacement, code_points in table.items():
            for code_point in code_points:
                merged.setdefault(code_point, (category, replacement))
    return merged


def find_overlaps(tables: TableSet) -> Dict[int, List[Category]]:
    """Return code points claimed by more than one category."""

    owners: Dict[int, List[Category]] = {}
    for category, table in tables:
        for code_points in table.values():
            for code_point in code_points:
                owners.setdefault(code_point, []).append(category)
    return {cp: cats for cp, cats in owners.items() if len(cats) > 1}


_LOOKUP = build_lookup(CATEGORY_TABLES)


def lookup(code_point: int) -> Optional[Tuple[Category, str]]:
    """Return the (category, replacement) entry for a code point, if any."""

    if code_point in PLAIN_ASCII:
        return None
    return _LOOKUP.get(code_point)


def classify(code_point: int) -> Category:
    """Resolve the category a code point belongs to."""

    entry = lookup(code_point)
    if entry is None:
        return Category.UNKNOWN
    return entry[0]


def fold_char(axis: Axis, char: str) -> str:
    """Apply simple (one-to-one) case mapping along the axis."""

    if axis is Axis.LOWERCASE:
        folded = char.lower()
    elif axis is Axis.UPPERCASE:
        folded = char.upper()
        # Greek iota-subscript letters expand in full; their titlecase form
        # is the simple uppercase mapping (U+1F80 -> U+1F88).
        if len(folded) != 1:
            folded = char.title()
    else:
        return char
    # Other full mappings such as U+0390 expand to several characters; keep those as-is.
    if len(folded) != 1:
        return char
    return folded


def _replacement(axis: Axis, category: Category, replacement: str) -> Mapping:
    if not replacement:
        return Drop(category=category)
    if axis is not Axis.NONE:
        replacement = "".join(fold_char(axis, char) for char in replacement)
    return Replace(category=category, chars=replacement)


def translate(axis: Axis, code_point: int) -> Mapping:
    """Decide the output for one code point: drop, replace or pass through.

    Some letters are curated in one case only (U+0181 but not U+0253). When the
    axis folds an uncurated code point onto a curated one, the curated entry
    applies, so a second pass never changes the output again.
    """

    entry = lookup(code_point)
    if entry is not None:
        return _replacement(axis, *entry)
    folded = ord(fold_char(axis, chr(code_point)))
    if folded != code_point:
        entry = lookup(folded)
        if entry is not None:
            return _replacement(axis, *entry)
    return PassThrough(code_point=code_point, folded=folded)
