"""
Regional Tax Settings

Sales regions carry the tax rate and tax code applied at checkout. The
rate for an order is the region's own rate, or the configured default
when the region has none.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from decimal import Decimal
from typing import Dict, Iterable, List, Optional, Union

from pydantic import BaseModel, Field, field_validator

from core.config import load_tax_config
from lib.validators import to_finite_decimal
from services.regions_config import DEFAULT_REGIONS, MORE_REGIONS
from utils.logging_config import setup_logger

logger = setup_logger(__name__)


class Region(BaseModel):
    """A sales region with its tax settings."""

    model_config = {"frozen": True}

    name: str = Field(..., min_length=1)
    currency_code: str = Field(..., min_length=3, max_length=3)
    tax_rate: Optional[Decimal] = Field(None, ge=0, le=100)
    tax_code: Optional[str] = None

    @field_validator("currency_code")
    @classmethod
    def lower_currency(cls, v: str) -> str:
        return v.strip().lower()

    @field_validator("tax_code")
    @classmethod
    def upper_tax_code(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        v = v.strip().upper()
        return v or None


def resolve_tax_rate(region: Optional[Region], default_rate: Optional[Decimal] = None) -> Decimal:
    """
    Tax rate to charge for an order in ``region``.

    An explicit 0 on the region is honoured; only a missing rate (or a
    missing region) falls back to the default.

    Args:
        region: Region of the order, or None
        default_rate: Fallback percentage; DEFAULT_TAX_RATE from the environment when omitted

    Returns:
        Percentage rate as Decimal
    """
    if region is not None and region.tax_rate is not None:
        return region.tax_rate

    if default_rate is None:
        default_rate = load_tax_config().default_rate

    logger.debug(
        f"No tax rate for region {region.name if region else None!r}, using default {default_rate}%"
    )
    return to_finite_decimal(default_rate, "default_rate")


class RegionRegistry:
    """In-memory lookup of regions by name (case-insensitive)."""

    def __init__(self, regions: Iterable[Union[Region, Dict]] = ()):
        self._regions: Dict[str, Region] = {}
        for region in regions:
            self.add(region)

    @classmethod
    def with_defaults(cls) -> "RegionRegistry":
        """Registry seeded with the default and additional regions."""
        return cls(DEFAULT_REGIONS + MORE_REGIONS)

    def add(self, region: Union[Region, Dict]) -> Region:
        """
        Add a region; adding an existing name keeps the original.

        Returns:
            The region stored under that name
        """
        if not isinstance(region, Region):
            region = Region(**region)

        key = region.name.casefold()
        existing = self._regions.get(key)
        if existing is not None:
            logger.info(f"Region {existing.name} already exists.")
            return existing

        self._regions[key] = region
        logger.debug(f"Added region: {region.name} ({region.currency_code})")
        return region

    def get(self, name: str) -> Region:
        """
        Look up a region by name.

        Raises:
            KeyError: If no region has that name
        """
        try:
            return self._regions[name.casefold()]
        except KeyError:
            raise KeyError(f"Region not found: {name!r}") from None

    def names(self) -> List[str]:
        return [region.name for region in self._regions.values()]

    def __contains__(self, name: str) -> bool:
        return name.casefold() in self._regions

    def __len__(self) -> int:
        return len(self._regions)
