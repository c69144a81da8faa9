# Services package
from .query_parser import query_parser, parse_query, QueryParser, ParsedQuery, PriceRange
from .product_filter import product_filter, ProductFilter, FilterOutcome
from .query_analysis import query_analysis_service, QueryAnalysisService, QueryAnalysis, to_query_analysis
from .search_service import search_service, SearchService, SearchResult

__all__ = [
    # Query parser
    "query_parser",
    "parse_query",
    "QueryParser",
    "ParsedQuery",
    "PriceRange",
    # Product filter
    "product_filter",
    "ProductFilter",
    "FilterOutcome",
    # Query analysis
    "query_analysis_service",
    "QueryAnalysisService",
    "QueryAnalysis",
    "to_query_analysis",
    # Search
    "search_service",
    "SearchService",
    "SearchResult",
]
