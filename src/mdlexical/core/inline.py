"""Inline emphasis tokenizer: splits a line into plain, bold, and italic spans"""

import re

from mdlexical.core.models import Bold, Italic, PlainText, Span


# Alternation order is the precedence: bold before italic so `**x**` never
# reads as italic `*` + `*x*` + `*`. Interiors are not re-scanned. An italic
# may not open on a doubled delimiter, so `**x*` is a plain `*` then italic `x`.
INLINE_RE = re.compile(
    r'\*\*(?P<bold_star>.+?)\*\*'
    r'|__(?P<bold_under>.+?)__'
    r'|\*(?!\*)(?P<italic_star>.+?)\*'
    r'|_(?!_)(?P<italic_under>.+?)_'
    r'|\[(?P<link_text>.*?)\]\((?P<link_url>.*?)\)'
)


def _match_span(m: re.Match) -> Span:
    groups = m.groupdict()
    if groups['bold_star'] is not None or groups['bold_under'] is not None:
        return Bold(text=groups['bold_star'] or groups['bold_under'])
    if groups['italic_star'] is not None or groups['italic_under'] is not None:
        return Italic(text=groups['italic_star'] or groups['italic_under'])
    # links keep only their anchor text, possibly empty; the URL is dropped
    return PlainText(text=groups['link_text'])


def parse_inline(text: str) -> list[Span]:
    """Split text into ordered spans. Unmatched markers stay in PlainText.

    Never returns an empty list: text with no inline markup comes back as a
    single PlainText span.
    """
    spans: list[Span] = []
    pos = 0

    for m in INLINE_RE.finditer(text):
        if m.start() > pos:
            spans.append(PlainText(text=text[pos:m.start()]))
        spans.append(_match_span(m))
        pos = m.end()

    if pos < len(text):
        spans.append(PlainText(text=text[pos:]))
    return spans or [PlainText(text=text)]
