"""Domain entities for internal representation.

Pure dataclasses handed to templates by the searchOptions and
searchParams helpers. They are NOT used for API contracts - use DTOs
from the dto package for that.
"""

from .search_options import SearchOptionsEntity
from .search_params import SearchParamsEntity

__all__ = ["SearchOptionsEntity", "SearchParamsEntity"]
