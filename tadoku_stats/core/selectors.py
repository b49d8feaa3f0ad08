"""
Document view over parsed HTML.

Provides the small query surface the extractors need (CSS lookup,
attribute reads, marker search over script text) and
returns SelectorResult values so each extraction step can decide
whether a miss is fatal and which field to blame.
"""

from dataclasses import dataclass
from typing import Optional, Union

from bs4 import BeautifulSoup, Tag

import structlog

from .errors import ExtractionError

logger = structlog.get_logger(__name__)


# Parser used for every document
HTML_PARSER = "lxml"


@dataclass
class SelectorResult:
    """Result from selector extraction."""
    value: Optional[str] = None
    element: Optional[Tag] = None
    found: bool = False

    def require(self, field: str) -> "SelectorResult":
        """
        Return self if something matched, otherwise fail.

        Args:
            field: Name of the field being extracted (used in the error)

        Raises:
            ExtractionError: If nothing matched
        """
        if not self.found:
            raise ExtractionError(field, "element not found")
        return self


class Selector:
    """
    Query interface over a parsed document or a node within it.

    Queries on a Tag only look inside that element.
    """

    def __init__(self, soup: Union[BeautifulSoup, Tag]):
        """
        Initialize selector with parsed HTML.

        Args:
            soup: BeautifulSoup document or a Tag to scope queries to
        """
        self.soup = soup

    @classmethod
    def from_html(cls, html: str) -> "Selector":
        """Parse raw HTML into a Selector."""
        return cls(BeautifulSoup(html, HTML_PARSER))

    def css_one(self, selector: str) -> SelectorResult:
        """
        Select first element using CSS selector.

        Args:
            selector: CSS selector string

        Returns:
            SelectorResult with first match
        """
        element = self.soup.select_one(selector)
        if element is None:
            return SelectorResult(found=False)

        return SelectorResult(
            value=element.get_text(strip=True),
            element=element,
            found=True,
        )

    def attr(self, selector: str, attribute: str) -> SelectorResult:
        """
        Read an attribute from the first element matching a CSS selector.

        Returns:
            SelectorResult with the attribute value, not found if either the
            element or the attribute is missing
        """
        result = self.css_one(selector)
        if not result.found:
            return result

        value = result.element.get(attribute)
        if value is None:
            return SelectorResult(element=result.element, found=False)

        return SelectorResult(value=value, element=result.element, found=True)

    def text_containing(self, tag: str, marker: str) -> SelectorResult:
        """
        Find the first tag whose raw text contains a marker string.

        Used for picking a script block out of many.
        """
        for element in self.soup.find_all(tag):
            # get_text() skips script bodies in newer bs4
            text = element.string if element.string is not None else element.get_text()
            if marker in text:
                text = str(text)
                return SelectorResult(value=text, element=element, found=True)
        logger.debug("marker_not_found", tag=tag, marker=marker)
        return SelectorResult(found=False)


def cell_texts(row: Tag, name: str = "td") -> list[str]:
    """Stripped text of every cell of a table row."""
    return [cell.get_text(strip=True) for cell in row.find_all(name)]
