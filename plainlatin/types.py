"""Shared data types for classification and scan results."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Union


class Axis(Enum):
    """Case-folding mode applied to everything a call emits."""

    NONE = "none"
    LOWERCASE = "lowercase"
    UPPERCASE = "uppercase"


class Category(Enum):
    """Semantic category of a code point, declared in precedence order."""

    NON_GLYPH = "non_glyph"
    DIACRITIC = "diacritic"
    LIGATURE = "ligature"
    SUPER_SUBSCRIPT = "super_subscript"
    ITEMIZED = "itemized"
    ADOPTED = "adopted"
    NUMERIC = "numeric"
    SPACING = "spacing"
    ALIGNMENT = "alignment"
    PUNCTUATION = "punctuation"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Drop:
    """The code point vanishes from the output."""

    category: Category

    @property
    def modified(self) -> bool:
        return True


@dataclass(frozen=True)
class Replace:
    """The code point is substituted by one to four plain characters."""

    category: Category
    chars: str

    @property
    def modified(self) -> bool:
        return True


@dataclass(frozen=True)
class PassThrough:
    """No category matched; the code point is kept, folded along the axis."""

    code_point: int
    folded: int

    @property
    def category(self) -> Category:
        return Category.UNKNOWN

    @property
    def modified(self) -> bool:
        return self.folded != self.code_point


Mapping = Union[Drop, Replace, PassThrough]


@dataclass(frozen=True)
class ScanResult:
    """Normalized text plus the accumulated modification flag."""

    text: str
    modified: bool
    categories: Dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class FoldResult:
    """Pipeline payload for a single folded text."""

    text: str
    modified: bool
    axis: str
    content_hash: str
    categories: Dict[str, int]
