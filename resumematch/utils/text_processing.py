"""
Text processing utilities for formatting and display.
"""

from typing import List


def truncate_display(text: str, max_len: int) -> str:
    """
    Truncate text for display with ellipsis if needed.

    Args:
        text: Text to truncate
        max_len: Maximum length including ellipsis

    Returns:
        Original text if within max_len, otherwise truncated with "..."

    Example:
        >>> truncate_display("short", 10)
        'short'
        >>> truncate_display("this is a very long string", 10)
        'this is...'
    """
    if len(text) <= max_len:
        return text
    if max_len <= 3:
        return text[:max_len]
    return text[: max_len - 3] + "..."


def wrap_words(text: str, width: int, indent: str = "") -> List[str]:
    """
    Greedy word wrap for report lines.

    Words longer than the width are placed on their own line unbroken.

    Args:
        text: Text to wrap
        width: Maximum line width including indent
        indent: Prefix for continuation lines

    Returns:
        Wrapped lines (first line has no indent)

    Example:
        >>> wrap_words("Add these missing technical skills: aws, docker", 24, "   ")
        ['Add these missing', '   technical skills:', '   aws, docker']
    """
    lines = []
    current = ""
    for word in text.split():
        prefix = indent if lines else ""
        candidate = f"{current} {word}" if current else word
        if current and len(prefix) + len(candidate) > width:
            lines.append(prefix + current)
            current = word
        else:
            current = candidate

    if current:
        lines.append((indent if lines else "") + current)

    return lines
