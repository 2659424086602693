"""Scan text code point by code point and fold it into plain characters."""

from typing import Dict, Iterator, List, Optional, Sequence, Union

from .classify import translate
from .tables import PLAIN_ASCII
from .types import Axis, Mapping, PassThrough, Replace, ScanResult

SCRATCH_SIZE = 4

TextInput = Union[str, Sequence[str]]


class ContractError(ValueError):
    """Raised when a caller violates a documented precondition."""

    pass


def iter_code_points(
    data: TextInput, start: int = 0, stop: Optional[int] = None
) -> Iterator[int]:
    """Yield code points in data[start:stop], joining surrogate pairs in range."""

    end = len(data) if stop is None else stop
    index = start
    while index < end:
        code_point = ord(data[index])
        index += 1
        if 0xD800 <= code_point <= 0xDBFF and index < end:
            low = ord(data[index])
            if 0xDC00 <= low <= 0xDFFF:
                code_point = 0x10000 + ((code_point - 0xD800) << 10) + (low - 0xDC00)
                index += 1
        yield code_point


def _resolve_range(data: TextInput, start: int, stop: Optional[int]) -> int:
    """Validate sub-range bounds and return the exclusive end."""

    end = len(data) if stop is None else stop
    if not 0 <= start <= end <= len(data):
        raise ContractError(f"invalid range [{start}, {end}) for input of length {len(data)}")
    return end


def emit(buffer: List[str], scratch: List[str], mapping: Mapping) -> bool:
    """Append the output of one mapping and report whether it changed anything."""

    if isinstance(mapping, PassThrough):
        buffer.append(chr(mapping.folded))
        return mapping.modified
    if isinstance(mapping, Replace):
        count = len(mapping.chars)
        for slot, char in enumerate(mapping.chars):
            scratch[slot] = char
        buffer.extend(scratch[:count])
    return True


def normalize_into(
    buffer: List[str],
    scratch: List[str],
    axis: Axis,
    data: TextInput,
    start: int = 0,
    stop: Optional[int] = None,
) -> bool:
    """Append the folded form of data[start:stop] to buffer.

    The buffer is only ever appended to; its contents are meaningful to the
    caller only when True is returned. Scratch must offer SCRATCH_SIZE slots.
    """

    if buffer is None or scratch is None:
        raise ContractError("buffer and scratch are required")
    if len(scratch) < SCRATCH_SIZE:
        raise ContractError(f"scratch needs {SCRATCH_SIZE} slots, got {len(scratch)}")
    end = _resolve_range(data, start, stop)

    modified = False
    for code_point in iter_code_points(data, start, end):
        if axis is Axis.NONE and code_point in PLAIN_ASCII:
            buffer.append(chr(code_point))
            continue
        changed = emit(buffer, scratch, translate(axis, code_point))
        modified = modified or changed
    return modified


def normalize(
    axis: Axis,
    data: TextInput,
    start: int = 0,
    stop: Optional[int] = None,
) -> Optional[str]:
    """Return the folded text, or signal that nothing changed.

    For ``str`` input the unchanged case hands back ``data`` itself (the whole
    input, also when a sub-range was requested). Other character sequences
    get None instead.
    """

    buffer: List[str] = []
    scratch = [""] * SCRATCH_SIZE
    if normalize_into(buffer, scratch, axis, data, start, stop):
        return "".join(buffer)
    if isinstance(data, str):
        return data
    return None


def scan(
    axis: Axis,
    data: TextInput,
    start: int = 0,
    stop: Optional[int] = None,
) -> ScanResult:
    """Fold data[start:stop] and tally the categories encountered."""

    end = _resolve_range(data, start, stop)
    buffer: List[str] = []
    scratch = [""] * SCRATCH_SIZE
    categories: Dict[str, int] = {}
    modified = False
    for code_point in iter_code_points(data, start, end):
        mapping = translate(axis, code_point)
        key = mapping.category.value
        categories[key] = categories.get(key, 0) + 1
        changed = emit(buffer, scratch, mapping)
        modified = modified or changed
    return ScanResult(text="".join(buffer), modified=modified, categories=categories)


def is_invariant(text: TextInput) -> bool:
    """Return True when folding along no axis would leave text unchanged."""

    return not any(translate(Axis.NONE, cp).modified for cp in iter_code_points(text))


def invariant_equals(left: str, right: str, axis: Axis = Axis.LOWERCASE) -> bool:
    """Compare two strings after folding both."""

    return normalize(axis, left) == normalize(axis, right)


def invariant_contains(haystack: str, needle: str, axis: Axis = Axis.LOWERCASE) -> bool:
    """Substring check that ignores diacritics, ligatures and spacing variants."""

    return normalize(axis, needle) in normalize(axis, haystack)
