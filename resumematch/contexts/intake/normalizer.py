"""
Text normalizer for the Intake context.

Cleans pasted or extracted resume and job description text before it reaches
the matching context. PDF extraction and copy-paste from job boards leave
non-breaking spaces, smart quotes, zero-width characters and runs of blank
lines that would otherwise split or glue keywords.
"""

import re
import unicodedata

# Unicode replacements: problematic char → ASCII equivalent
UNICODE_REPLACEMENTS = {
    # Spaces
    "\u00a0": " ",  # non-breaking space
    "\u202f": " ",  # narrow no-break space
    "\u2009": " ",  # thin space
    # Zero-width characters → remove
    "\u200b": "",  # zero-width space
    "\u200c": "",  # zero-width non-joiner
    "\u200d": "",  # zero-width joiner
    "\u2060": "",  # word joiner
    "\ufeff": "",  # BOM
    "\u00ad": "",  # soft hyphen (PDF line-break artifact)
    # Quotes
    "\u2018": "'",  # left single quote
    "\u2019": "'",  # right single quote
    "\u201c": '"',  # left double quote
    "\u201d": '"',  # right double quote
    # Dashes
    "\u2010": "-",  # hyphen
    "\u2011": "-",  # non-breaking hyphen
    "\u2013": "-",  # en dash
    "\u2014": " - ",  # em dash, spaced so joined words separate
    # Bullets and misc
    "\u2022": "*",  # bullet
    "\u25cf": "*",  # black circle (common PDF bullet)
    "\u25aa": "*",  # small black square
    "\u00b7": "*",  # middle dot
    "\u2026": "...",  # ellipsis
}

# Horizontal whitespace runs (keeps newlines)
_INLINE_SPACE_RUN = re.compile(r"[ \t]+")
# Three or more newlines (two or more blank lines)
_BLANK_LINE_RUN = re.compile(r"\n\s*\n(\s*\n)+")


def normalize_unicode(text: str) -> str:
    """
    Normalize unicode characters that interfere with keyword matching.

    Applies NFKC normalization and replaces common problematic characters
    with ASCII equivalents.

    Args:
        text: Raw text possibly containing problematic unicode

    Returns:
        Text with normalized unicode

    Example:
        >>> normalize_unicode("Python developer \u2013 \u201cremote\u201d")
        'Python developer - "remote"'
    """
    text = unicodedata.normalize("NFKC", text)

    for char, replacement in UNICODE_REPLACEMENTS.items():
        text = text.replace(char, replacement)

    return text


def collapse_whitespace(text: str) -> str:
    """
    Collapse runs of spaces/tabs and limit blank lines to one in a row.

    Line breaks are preserved so section structure stays readable in reports.
    """
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    lines = [_INLINE_SPACE_RUN.sub(" ", line).strip() for line in text.split("\n")]
    return _BLANK_LINE_RUN.sub("\n\n", "\n".join(lines))


def prepare_text(text: str) -> str:
    """
    Prepare raw resume or job description text for analysis.

    This is the main entry point for intake normalization:
    - Unicode normalization (non-breaking spaces, smart quotes, bullets, etc.)
    - Whitespace collapsing
    - Leading/trailing whitespace trimmed

    Args:
        text: Raw text from a file, paste buffer or extractor

    Returns:
        Normalized text
    """
    return collapse_whitespace(normalize_unicode(text)).strip()
