import re
from typing import Dict, List, Tuple, Iterable
from models.data_models import (
    AnnotationTree, Block, BreakAction, Page, Paragraph, Point, Polygon, Region,
    Symbol, Word
)

# Vision reports detected breaks either by enum name or by number
BREAK_ACTIONS = {
    None: BreakAction.NONE,
    0: BreakAction.NONE,
    "UNKNOWN": BreakAction.NONE,
    1: BreakAction.SPACE,
    "SPACE": BreakAction.SPACE,
    2: BreakAction.SPACE,
    "SURE_SPACE": BreakAction.SPACE,
    3: BreakAction.SPACE,
    "EOL_SURE_SPACE": BreakAction.SPACE,
    4: BreakAction.NONE,
    "HYPHEN": BreakAction.NONE,
    5: BreakAction.NEWLINE,
    "LINE_BREAK": BreakAction.NEWLINE,
}

SEPARATORS = {
    BreakAction.NONE: "",
    BreakAction.SPACE: " ",
    BreakAction.NEWLINE: "\n",
}

_SPACE_BEFORE_NEWLINE = re.compile(r"[ \t]+\n")


def resolve_break(code) -> BreakAction:
    """Map a symbolic or numeric break code to a BreakAction"""
    try:
        return BREAK_ACTIONS.get(code, BreakAction.NONE)
    except TypeError:
        # unhashable codes are unknown codes
        return BreakAction.NONE


def normalize_vertices(vertices: Iterable) -> Polygon:
    """Convert Vision vertices (dicts or objects) to Points, missing coords -> 0"""
    out = []
    for v in vertices or []:
        if isinstance(v, dict):
            x, y = v.get("x"), v.get("y")
        else:
            x, y = getattr(v, "x", None), getattr(v, "y", None)
        out.append(Point(x or 0, y or 0))
    return tuple(out)


def annotation_from_vision(annotation) -> AnnotationTree:
    """Build an AnnotationTree from a Vision full_text_annotation message"""
    if annotation is None:
        return AnnotationTree()

    def symbol(s):
        prop = getattr(s, "property", None)
        detected = getattr(prop, "detected_break", None)
        return Symbol(text=getattr(s, "text", "") or "",
                      break_action=resolve_break(getattr(detected, "type_", None)))

    def paragraph(p):
        bbox = getattr(p, "bounding_box", None)
        return Paragraph(
            words=tuple(Word(tuple(symbol(s) for s in w.symbols)) for w in p.words),
            polygon=normalize_vertices(getattr(bbox, "vertices", None)),
        )

    return AnnotationTree(tuple(
        Page(tuple(Block(tuple(paragraph(p) for p in b.paragraphs)) for b in page.blocks))
        for page in annotation.pages
    ))


def annotation_from_dict(data: Dict) -> AnnotationTree:
    """Build an AnnotationTree from the REST/JSON form (camelCase keys)"""
    data = data or {}

    def symbol(s):
        detected = (s.get("property") or {}).get("detectedBreak") or {}
        return Symbol(text=s.get("text") or "", break_action=resolve_break(detected.get("type")))

    def paragraph(p):
        return Paragraph(
            words=tuple(Word(tuple(symbol(s) for s in w.get("symbols") or []))
                        for w in p.get("words") or []),
            polygon=normalize_vertices((p.get("boundingBox") or {}).get("vertices")),
        )

    return AnnotationTree(tuple(
        Page(tuple(Block(tuple(paragraph(p) for p in b.get("paragraphs") or []))
                   for b in page.get("blocks") or []))
        for page in data.get("pages") or []
    ))


def paragraph_text(paragraph: Paragraph) -> str:
    parts = []
    for word in paragraph.words:
        for symbol in word.symbols:
            parts.append(symbol.text or "")
            parts.append(SEPARATORS[symbol.break_action])
    text = "".join(parts)
    return _SPACE_BEFORE_NEWLINE.sub("\n", text).strip()


def reconstruct_paragraph(paragraph: Paragraph) -> Tuple[str, Polygon]:
    """Rebuild a paragraph's text and bounding polygon"""
    return paragraph_text(paragraph), tuple(paragraph.polygon)


def iter_paragraphs(tree: AnnotationTree) -> Iterable[Paragraph]:
    for page in tree.pages:
        for block in page.blocks:
            for para in block.paragraphs:
                yield para


def extract_regions(tree: AnnotationTree) -> List[Region]:
    """
    Regions in page -> block -> paragraph order. Paragraphs with no text
    or fewer than 4 polygon points are dropped.
    """
    regions = []
    for para in iter_paragraphs(tree):
        text, polygon = reconstruct_paragraph(para)
        if not text or len(polygon) < 4:
            continue
        regions.append(Region(text=text, polygon=polygon))
    return regions
