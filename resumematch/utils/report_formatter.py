"""
Utility functions for formatting text-based reports and tables.

Provides consistent table formatting for match analysis reports.
"""

from typing import Any, List, Sequence

from resumematch.utils.text_processing import truncate_display


class Column:
    """Column definition for table formatting."""

    def __init__(self, name: str, width: int, align: str = "<"):
        """
        Args:
            name: Column header name
            width: Column width in characters
            align: Alignment ('<' left, '>' right, '^' center)
        """
        self.name = name
        self.width = width
        self.align = align

    def format_header(self) -> str:
        """Format column header with alignment."""
        return f"{self.name:{self.align}{self.width}}"

    def format_value(self, value: Any) -> str:
        """Format column value with alignment, truncating text that overflows."""
        if isinstance(value, str):
            value = truncate_display(value, self.width)
        return f"{value:{self.align}{self.width}}"


class TableFormatter:
    """Builder for formatted text reports with aligned table sections."""

    def __init__(self, columns: List[Column] = None, total_width: int = 80):
        """
        Args:
            columns: Column definitions for add_table_header()/add_row()
            total_width: Total report width for separators
        """
        self.columns = columns or []
        self.total_width = total_width
        self.lines: List[str] = []

    def set_columns(self, columns: List[Column]) -> "TableFormatter":
        """
        Replace the active column set, so one report can hold several tables.

        Returns:
            Self for method chaining
        """
        self.columns = columns
        return self

    def add_section_header(self, title: str) -> "TableFormatter":
        """
        Add section header with top/bottom separator lines.

        Args:
            title: Section title

        Returns:
            Self for method chaining
        """
        self.lines.append("=" * self.total_width)
        self.lines.append(title)
        self.lines.append("=" * self.total_width)
        return self

    def add_table_header(self) -> "TableFormatter":
        """Add table header row with column names, followed by a separator."""
        self.lines.append(" ".join(col.format_header() for col in self.columns))
        return self.add_separator()

    def add_separator(self, char: str = "-") -> "TableFormatter":
        """Add horizontal separator line."""
        self.lines.append(char * self.total_width)
        return self

    def add_row(self, values: List[Any]) -> "TableFormatter":
        """
        Add data row with column values.

        Args:
            values: List of values (one per column)

        Returns:
            Self for method chaining

        Raises:
            ValueError: If number of values doesn't match columns
        """
        if len(values) != len(self.columns):
            raise ValueError(f"Expected {len(self.columns)} values, got {len(values)}")

        row_parts = [col.format_value(val) for col, val in zip(self.columns, values)]
        self.lines.append(" ".join(row_parts).rstrip())
        return self

    def add_chip_list(self, label: str, items: Sequence[str], limit: int) -> "TableFormatter":
        """
        Add a labelled, comma-separated list of keywords.

        Shows at most `limit` items followed by "+N more" when truncated.
        Nothing is added for an empty list.

        Returns:
            Self for method chaining
        """
        if not items:
            return self
        self.lines.append(f"{label} ({len(items)}):")
        self.lines.append(f"  {format_chip_list(items, limit)}")
        return self

    def add_blank_line(self) -> "TableFormatter":
        """Add blank line."""
        self.lines.append("")
        return self

    def add_text(self, text: str) -> "TableFormatter":
        """Add arbitrary text line."""
        self.lines.append(text)
        return self

    def render(self) -> str:
        """
        Render accumulated lines to string.

        Returns:
            Formatted report string
        """
        return "\n".join(self.lines)


def format_chip_list(items: Sequence[str], limit: int) -> str:
    """
    Join up to `limit` items with commas, appending "+N more" for the rest.

    Example:
        >>> format_chip_list(["python", "aws", "docker"], 2)
        'python, aws, +1 more'
    """
    shown = list(items[:limit])
    if len(items) > limit:
        shown.append(f"+{len(items) - limit} more")
    return ", ".join(shown)


def percentage(count: int, total: int) -> int:
    """
    Whole-number percentage of count in total (0 when total is 0).

    Halves round up, so 1 of 8 is 13%.
    """
    if total <= 0:
        return 0
    return int(count * 100 / total + 0.5)


def format_percentage(count: int, total: int) -> str:
    """Format count as a whole-number percentage of total (e.g., "75%")."""
    return f"{percentage(count, total)}%"
