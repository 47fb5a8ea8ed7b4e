from typing import Final

# Base units every recognized unit collapses into
MASS_UNIT: Final[str] = "g"
VOLUME_UNIT: Final[str] = "ml"
COUNT_UNIT: Final[str] = "pcs"

# Rounding applied to aggregated quantities before they are shown
DISPLAY_DECIMALS: Final[int] = 2

# Servings assumed for a recipe that does not declare any
DEFAULT_RECIPE_SERVINGS: Final[int] = 2

AFFILIATE_QUERY_PLACEHOLDER: Final[str] = "{query}"
