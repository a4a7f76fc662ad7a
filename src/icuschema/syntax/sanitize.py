"""Template sanitizing: whitespace removal and ICU apostrophe quoting.

Runs as a pre-pass before any brace or tag scanning, so the scanners never
have to know about quoting:

    '...'   escaped span, removed entirely (cannot introduce arguments or tags)
    ''      literal apostrophe, inside or outside a span; never toggles quoting
    '...    unterminated span, everything up to EOF is literal (removed)

Whitespace (space, tab, LF, CR) is removed by default so that argument
syntax such as "{ count , plural , one {...} }" reads as
"{count,plural,one{...}}". Literal text fidelity is not preserved; only
argument and tag discovery depend on the output.
"""

from icuschema.constants import QUOTE_CHAR, WHITESPACE_CHARS

__all__ = ["sanitize"]

_DOUBLED_QUOTE = QUOTE_CHAR * 2


def _skip_escaped_span(template: str, start: int) -> int:
    """Return the position just past the quote closing a span.

    Args:
        template: Raw template
        start: Position just after the opening quote

    Returns:
        Position after the closing quote, or len(template) when unterminated.
    """
    pos = start
    while True:
        end = template.find(QUOTE_CHAR, pos)
        if end < 0:
            return len(template)
        if template.startswith(_DOUBLED_QUOTE, end):
            pos = end + 2
            continue
        return end + 1


def sanitize(template: str, *, strip_whitespace: bool = True) -> str:
    """Remove whitespace and escaped spans from a template.

    Args:
        template: Raw ICU MessageFormat template
        strip_whitespace: Remove space, tab, LF and CR (default: True).
            The tag extractor keeps whitespace to separate tag names from
            attributes.

    Returns:
        Text safe for brace and tag scanning. Never raises.

    Example:
        >>> sanitize("Hello, {name}!")
        'Hello,{name}!'
        >>> sanitize("'{word1} {word2}', but {word3}")
        ',but{word3}'
        >>> sanitize("It''s {n}", strip_whitespace=False)
        "It's {n}"
        >>> sanitize("Unclosed quote '{arg}")
        'Unclosedquote'
    """
    parts: list[str] = []
    pos = 0
    length = len(template)
    while pos < length:
        char = template[pos]
        if char == QUOTE_CHAR:
            if template.startswith(_DOUBLED_QUOTE, pos):
                parts.append(QUOTE_CHAR)
                pos += 2
            else:
                pos = _skip_escaped_span(template, pos + 1)
            continue
        if not (strip_whitespace and char in WHITESPACE_CHARS):
            parts.append(char)
        pos += 1
    return "".join(parts)
