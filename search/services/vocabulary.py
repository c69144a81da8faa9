"""
Search Vocabularies

Fixed, ordered term lists used by the query parser. Order matters: each
extractor returns the FIRST entry of its list that occurs in the query, so
reordering an entry changes which term wins when several are present.

Entity Types:
- COLORS: Color names
- CATEGORIES: Product categories and product-type nouns
- PATTERNS: Style and material descriptors
- GENDERS: Gender terms (possessive/plural variants checked at match time)
"""

# =============================================================================
# COLORS (14)
# =============================================================================
COLORS = (
    "red", "blue", "green", "yellow", "black", "white", "purple",
    "orange", "pink", "brown", "gray", "grey", "silver", "gold",
)

# =============================================================================
# CATEGORIES (14): generic departments and specific product nouns
# =============================================================================
CATEGORIES = (
    "dress", "jeans", "shoes", "headphones", "bag", "watch",
    "clothing", "footwear", "electronics", "accessories", "sports",
    "home", "jacket", "shirt",
)

# =============================================================================
# PATTERNS (9): print styles and materials
# =============================================================================
PATTERNS = (
    "floral", "striped", "plain", "patterned", "solid", "printed",
    "leather", "denim", "cotton",
)

# =============================================================================
# GENDERS
# =============================================================================
GENDERS = ("men", "women", "men's", "women's", "unisex")


def gender_variants(gender: str) -> tuple:
    """Surface forms that count as a mention of ``gender``."""
    return (gender, f"{gender}'s", f"{gender}s")
