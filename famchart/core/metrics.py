"""Node metrics: width/height per node id.

Metrics are pure lookups. The layout engine and the editor call them on
every use and never cache the results, so swapping the metrics object
(e.g. after a font size change) takes effect on the next layout.
"""

import logging
import unicodedata
from typing import Optional

from famchart.config.settings import get_setting
from famchart.models.genealogy import GenealogyGraph, Individual

logger = logging.getLogger(__name__)

# Text sizing constants (layout units at zoom 1.0)
H_PAD = 12.0
V_PAD = 10.0
LINE_SPACING = 1.2
AVG_CHAR_FACTOR = 0.6  # average glyph width as a fraction of font size
MIN_TEXT_WIDTH = 80.0
MIN_TEXT_HEIGHT = 60.0
MIN_FONT_SIZE = 6.0


class NodeMetrics:
    """Fixed-size metrics used for every node id.

    Args:
        default_width: Width of every node (defaults to the 'node_width' setting)
        default_height: Height of every node (defaults to the 'node_height' setting)
    """

    def __init__(
        self,
        default_width: Optional[float] = None,
        default_height: Optional[float] = None,
    ):
        self.default_width = (
            default_width if default_width is not None else get_setting('node_width')
        )
        self.default_height = (
            default_height if default_height is not None else get_setting('node_height')
        )

    def width(self, node_id: str) -> float:
        return self.default_width

    def height(self, node_id: str) -> float:
        return self.default_height


def approx_text_width(text: Optional[str], font_size: float) -> float:
    """Estimate rendered text width without platform font metrics."""
    if not text:
        return 0.0
    return len(text) * font_size * AVG_CHAR_FACTOR


def _is_cyrillic(text: Optional[str]) -> bool:
    if not text:
        return False
    return any("CYRILLIC" in unicodedata.name(ch, "") for ch in text)


def format_date_line(individual: Individual) -> str:
    """Build the third label line from birth/death dates.

    Both dates: "1900 - 1980". Only one: a short prefix ("b.:", "d.:"),
    localized for Cyrillic names.
    """
    birth = (individual.birth_date or "").strip()
    death = (individual.death_date or "").strip()
    if not birth and not death:
        return ""

    cyrillic = _is_cyrillic(individual.first_name) or _is_cyrillic(individual.last_name)
    if birth and death:
        return f"{birth} - {death}"
    if birth:
        return ("род.:" if cyrillic else "b.:") + birth
    return ("ум.:" if cyrillic else "d.:") + death


class TextAwareNodeMetrics(NodeMetrics):
    """Size person boxes from their label text.

    The label has three centered lines: first name, last name and a date
    line. Width is the widest line plus horizontal padding; height fits
    three lines plus vertical padding. Family nodes and unknown ids fall
    back to the fixed defaults.
    """

    def __init__(
        self,
        graph: Optional[GenealogyGraph] = None,
        base_font_size: float = 12.0,
        default_width: Optional[float] = None,
        default_height: Optional[float] = None,
    ):
        super().__init__(default_width, default_height)
        self.graph = graph
        self.base_font_size = base_font_size

    def set_base_font_size(self, size: float) -> None:
        """Change the base font size; values of 6 or less are ignored."""
        if size > MIN_FONT_SIZE:
            self.base_font_size = size
        else:
            logger.debug(f"Ignoring base font size {size} (must be > {MIN_FONT_SIZE})")

    def _individual(self, node_id: str) -> Optional[Individual]:
        if self.graph is None or not node_id:
            return None
        return self.graph.individual(node_id)

    def width(self, node_id: str) -> float:
        individual = self._individual(node_id)
        if individual is None:
            return super().width(node_id)

        font = self.base_font_size
        widest = max(
            approx_text_width(individual.first_name, font),
            approx_text_width(individual.last_name, font),
            approx_text_width(format_date_line(individual), font),
        )
        return max(widest + H_PAD * 2.0, MIN_TEXT_WIDTH)

    def height(self, node_id: str) -> float:
        if self._individual(node_id) is None:
            return super().height(node_id)
        line_height = self.base_font_size * LINE_SPACING
        return max(V_PAD * 2.0 + line_height * 3.0, MIN_TEXT_HEIGHT)


__all__ = [
    "NodeMetrics",
    "TextAwareNodeMetrics",
    "approx_text_width",
    "format_date_line",
]
