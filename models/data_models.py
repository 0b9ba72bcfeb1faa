from enum import Enum
from typing import List, Dict, Tuple, NamedTuple
from dataclasses import dataclass, field


class Point(NamedTuple):
    x: float
    y: float


Polygon = Tuple[Point, ...]


class BreakAction(Enum):
    NONE = "none"
    SPACE = "space"
    NEWLINE = "newline"


# OCR annotation tree, built once from the Vision response
@dataclass(frozen=True)
class Symbol:
    text: str
    break_action: BreakAction = BreakAction.NONE

@dataclass(frozen=True)
class Word:
    symbols: Tuple[Symbol, ...] = ()

@dataclass(frozen=True)
class Paragraph:
    words: Tuple[Word, ...] = ()
    polygon: Polygon = ()

@dataclass(frozen=True)
class Block:
    paragraphs: Tuple[Paragraph, ...] = ()

@dataclass(frozen=True)
class Page:
    blocks: Tuple[Block, ...] = ()

@dataclass(frozen=True)
class AnnotationTree:
    pages: Tuple[Page, ...] = ()


@dataclass(frozen=True)
class Region:
    text: str
    polygon: Polygon
    translated_text: str = ""

@dataclass(frozen=True)
class Rect:
    x: int
    y: int
    w: int
    h: int

@dataclass(frozen=True)
class TextStyle:
    font: any  # PIL ImageFont
    fill: Tuple[int, int, int]
    line_height: int

@dataclass(frozen=True)
class FontFit:
    font: any  # PIL ImageFont
    font_size: int
    line_height: int
    lines: List[str]
    attempts: int

@dataclass
class ProcessedImage:
    original_image: any  # PIL Image
    final_image: any     # PIL Image
    regions: List[Region]
    metadata: Dict = field(default_factory=dict)
