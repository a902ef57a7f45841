# article_analyzer/services/bias_scan/highlight.py
"""
Highlighter: render a BiasReport as HTML with <mark> spans.

Offsets in a report refer to the original, unescaped text. Escaping can
change character counts ("&" becomes "&amp;"), so the text is sliced at the
match offsets first and each slice is escaped afterwards.
"""

import html
import logging

from article_analyzer.lexicon import DetectorGroup
from .types import BiasReport, validate_text

logger = logging.getLogger(__name__)

HIGHLIGHT_CLASSES = {
    DetectorGroup.SUBJECTIVE_INTENSIFIERS: "bias-intensifier",
    DetectorGroup.FACTIVE_VERBS: "bias-factive",
}


def build_highlighted_html(text: str, report: BiasReport) -> str:
    """
    Returns escaped HTML with each retained match wrapped in:
      <mark class="bias-intensifier" data-category="high" data-term="...">...</mark>

    Matches that do not line up with the given text (out of range, or a
    surface form that differs from the text at that offset) are skipped.
    """
    validate_text(text)
    if not text:
        return ""

    out = []
    last = 0
    for match in report.matches:
        if match.start < last or match.end > len(text) or text[match.start : match.end] != match.surface:
            logger.warning(
                f"Skipping highlight for '{match.surface}' at {match.start}-{match.end}: offsets do not fit text"
            )
            continue
        out.append(html.escape(text[last : match.start]))
        out.append(
            f'<mark class="{HIGHLIGHT_CLASSES[match.group]}" '
            f'data-category="{match.category.value}" '
            f'data-term="{html.escape(match.term)}">'
            f"{html.escape(match.surface)}</mark>"
        )
        last = match.end

    out.append(html.escape(text[last:]))
    return "".join(out)
