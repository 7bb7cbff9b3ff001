"""
Ranked-list parsers for the counters page and the tier list table.
"""

from typing import List

from bs4 import BeautifulSoup

from lolbot.services.build_extractor import element_text, select_required


def format_ranked_line(name: str, value: str, name_width: int) -> str:
    return f"{name:<{name_width}} - {value}"


def extract_ranked_rows(
    document: BeautifulSoup,
    row_selector: str,
    name_selector: str,
    value_selector: str,
    limit: int,
    name_width: int,
) -> List[str]:
    """
    Read up to `limit` rows as fixed-width "name - value" lines.

    A row missing its name or value aborts the whole extraction with
    ElementNotFoundError; rows are never skipped.
    """
    lines = []
    for row in document.select(row_selector)[:limit]:
        name = element_text(select_required(row, name_selector))
        value = element_text(select_required(row, value_selector))
        lines.append(format_ranked_line(name, value, name_width))
    return lines
