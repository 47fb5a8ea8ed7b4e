"""Unit conversion into the three base dimensions (g, ml, pcs).

Unrecognized units are not an error: they pass through unchanged so the
aggregator can still merge lines that share the exact same unit string.
"""
from __future__ import annotations
import logging
from typing import Mapping, Optional, Tuple

from grocery.logic.matching import DEFAULT_MATCHER, NameMatcher
from grocery.logic.units.tables import DENSITY_G_PER_ML, UNIT_SYNONYMS, UNIT_TO_BASE
from grocery.utilities.constants import MASS_UNIT, VOLUME_UNIT

logger = logging.getLogger(__name__)

__all__ = ["UnitConverter", "DEFAULT_CONVERTER"]


class UnitConverter:
    def __init__(self,
                 synonyms: Mapping[str, str] = UNIT_SYNONYMS,
                 unit_to_base: Mapping[str, Tuple[str, float]] = UNIT_TO_BASE,
                 densities: Mapping[str, float] = DENSITY_G_PER_ML,
                 matcher: NameMatcher = DEFAULT_MATCHER):
        self.synonyms = synonyms
        self.unit_to_base = unit_to_base
        self.densities = densities
        self.matcher = matcher

    def normalize_unit(self, unit: str) -> str:
        '''Resolve synonyms ("Tablespoons" -> "tbsp"); unknown units come back lower-cased.'''
        u = (unit or '').strip().lower()
        return self.synonyms.get(u, u)

    def is_known(self, unit: str) -> bool:
        return self.normalize_unit(unit) in self.unit_to_base

    def base_unit(self, unit: str) -> str:
        '''Base dimension of ``unit``; unknown units are their own base.'''
        canonical = self.normalize_unit(unit)
        entry = self.unit_to_base.get(canonical)
        return entry[0] if entry else canonical

    def density_for(self, name: str) -> Optional[float]:
        '''Grams per ml for the first declared density key found in ``name``.'''
        for key, density in self.densities.items():
            if self.matcher.matches(key, name):
                return density
        return None

    def package_to_base(self, size_value: float, size_unit: str) -> Tuple[str, float]:
        '''Convert a declared package size. No density correction is applied.'''
        canonical = self.normalize_unit(size_unit)
        entry = self.unit_to_base.get(canonical)
        if entry is None:
            return canonical, size_value
        base, factor = entry
        return base, size_value * factor

    def to_base(self, name: str, quantity: float, unit: str) -> Tuple[str, float]:
        """Convert an ingredient quantity to ``(base_unit, base_value)``.

        Volume results are re-expressed in grams when a density entry
        matches ``name``, so "2 cups flour" merges with "100 g flour".
        """
        canonical = self.normalize_unit(unit)
        if not self.is_known(canonical):
            logger.debug("Unrecognized unit %r for %r; passing through", unit, name)
            return canonical, quantity

        base, value = self.package_to_base(quantity, canonical)
        if base == VOLUME_UNIT:
            density = self.density_for(name)
            if density is not None:
                logger.debug("Density %.2f g/ml applied to %r (%s ml)", density, name, value)
                return MASS_UNIT, value * density
        return base, value


DEFAULT_CONVERTER = UnitConverter()
