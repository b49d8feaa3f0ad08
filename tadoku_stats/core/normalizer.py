"""
Normalization utilities for contest page data.

Handles:
- Numeric cell parsing ("638.9", "91.0")
- Reading-language labels ("Reading languages: jp")
- Chart series pulled out of the progress chart script
"""

import re
from typing import Optional

import structlog

from .errors import ExtractionError

logger = structlog.get_logger(__name__)


# Chart script fragments, e.g.
#   name: "Overall",
#   data: [294.20000000000005, 0, 8.0, 57.6]
SERIES_NAME_PATTERN = r'name: "([^"]*)"'
SERIES_DATA_PATTERN = r"data: \[([^\]]*)\]"

# Number of leading words in the language info line ("Reading languages:")
LANGUAGE_LABEL_PREFIX_WORDS = 2


def parse_number(text: Optional[str], field: str) -> float:
    """
    Parse a numeric token from page text.

    Args:
        text: Token to parse
        field: Field name reported on failure

    Returns:
        Parsed float

    Raises:
        ExtractionError: If the token is missing or not a number
    """
    if text is None:
        raise ExtractionError(field, "missing value")

    token = text.strip()
    try:
        return float(token)
    except ValueError:
        raise ExtractionError(field, f"not a number: {token!r}") from None


def parse_number_list(text: str, field: str) -> list[float]:
    """
    Parse a comma-separated list of numbers.

    An empty list body yields an empty list.
    """
    if not text.strip():
        return []
    return [parse_number(token, field) for token in text.split(",")]


def language_label(text: Optional[str]) -> str:
    """
    Strip the fixed leading phrase from the reading-language info line.

    "Reading languages: jp"      -> "jp"
    "Reading languages: zh  ko"  -> "zh  ko"

    Raises:
        ExtractionError: If nothing is left after the leading phrase
    """
    if not text:
        raise ExtractionError("reading_language", "missing info text")

    parts = text.strip().split(None, LANGUAGE_LABEL_PREFIX_WORDS)
    if len(parts) <= LANGUAGE_LABEL_PREFIX_WORDS:
        raise ExtractionError("reading_language", f"no label in {text.strip()!r}")

    return parts[LANGUAGE_LABEL_PREFIX_WORDS]


def extract_series(script: str) -> list[tuple[str, list[float]]]:
    """
    Pull (name, data) pairs out of the progress chart script.

    This is a targeted match over the chart literal, not a script parser.
    Names and data arrays are paired by position.

    Args:
        script: Text of the script block

    Returns:
        List of (series name, daily values) in script order

    Raises:
        ExtractionError: If names and arrays don't line up
    """
    names = re.findall(SERIES_NAME_PATTERN, script)
    arrays = re.findall(SERIES_DATA_PATTERN, script)

    if not names:
        raise ExtractionError("series", "no series names in chart script")

    if len(names) != len(arrays):
        raise ExtractionError(
            "series",
            f"{len(names)} series names but {len(arrays)} data arrays",
        )

    series = [
        (name, parse_number_list(body, f"series[{name}]"))
        for name, body in zip(names, arrays)
    ]

    logger.debug("series_extracted", names=names)
    return series


def format_value(value: float) -> str:
    """Format a value at display precision."""
    return f"{value:.2f}"
