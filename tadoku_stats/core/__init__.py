"""
Core layer - stable foundation for the stats pipeline.

Components:
- models: UserRecord, RankEntry, RankTable dataclasses
- errors: StatsError, ExtractionError, RankingError
- selectors: Document view over BeautifulSoup
- normalizer: Number, language label and chart series parsing
- lookups: Category wording, language order and names
- http_client: Rate-limited async page fetcher
"""

from .errors import StatsError, ExtractionError, RankingError
from .models import (
    UserRecord,
    RankEntry,
    RankTable,
    TableKind,
    OVERALL_SERIES,
    PRESENCE_THRESHOLD,
)
from .selectors import Selector, SelectorResult
from .normalizer import (
    parse_number,
    parse_number_list,
    language_label,
    extract_series,
    format_value,
)
from .lookups import (
    CategoryWording,
    category_wording,
    language_name,
    language_sort_key,
)

__all__ = [
    "StatsError",
    "ExtractionError",
    "RankingError",
    "UserRecord",
    "RankEntry",
    "RankTable",
    "TableKind",
    "OVERALL_SERIES",
    "PRESENCE_THRESHOLD",
    "Selector",
    "SelectorResult",
    "parse_number",
    "parse_number_list",
    "language_label",
    "extract_series",
    "format_value",
    "CategoryWording",
    "category_wording",
    "language_name",
    "language_sort_key",
]
