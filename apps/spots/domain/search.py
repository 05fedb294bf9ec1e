"""
Spot Search Compiler

Turns raw, untrusted query parameters into a bounded SpotQuery.

Every parameter is checked and all violations are reported together
through one ValidationError. Latitude, longitude and price each become a
range constraint only when at least one of their bounds is given; the
constraints are ANDed by the store.
"""

import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, List, Mapping, Tuple

from shared.domain.base import ValueObject
from shared.domain.errors import FieldErrors
from shared.domain.value_objects import ValueRange

DEFAULT_PAGE = 1
MAX_PAGE_SIZE = 20

MAX_LATITUDE = Decimal(90)
MAX_LONGITUDE = Decimal(180)

# Largest row offset a 64-bit SQL integer can hold.
MAX_OFFSET = 2 ** 63 - 1

_INTEGER = re.compile(r"[+-]?[0-9]+")
_NUMBER = re.compile(r"[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?")

PAGE_INVALID = "Page must be greater than or equal to 1"
SIZE_INVALID = "Size must be greater than or equal to 1"
MIN_LAT_INVALID = "Minimum latitude is invalid"
MAX_LAT_INVALID = "Maximum latitude is invalid"
MIN_LNG_INVALID = "Minimum longitude is invalid"
MAX_LNG_INVALID = "Maximum longitude is invalid"
MIN_PRICE_INVALID = "Minimum price must be greater than or equal to 0"
MAX_PRICE_INVALID = "Maximum price must be greater than or equal to 0"


@dataclass(frozen=True)
class SpotFilter(ValueObject):
    """Range constraints over spot columns; None means unconstrained."""

    lat: ValueRange | None = None
    lng: ValueRange | None = None
    price: ValueRange | None = None

    def constraints(self) -> List[Tuple[str, ValueRange]]:
        """(field name, range) pairs for every constrained field"""
        return [
            (name, value_range)
            for name, value_range in (('lat', self.lat), ('lng', self.lng), ('price', self.price))
            if value_range is not None
        ]

    def matches(self, spot) -> bool:
        return all(value_range.contains(getattr(spot, name)) for name, value_range in self.constraints())


@dataclass(frozen=True)
class SpotQuery(ValueObject):
    """A validated search: filter plus pagination window."""

    spot_filter: SpotFilter
    page: int
    size: int

    @property
    def limit(self) -> int:
        return self.size

    @property
    def offset(self) -> int:
        return self.size * (self.page - 1)


def _raw(params: Mapping[str, Any], name: str) -> str | None:
    value = params.get(name)
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def _bounds(lower: Decimal | None, upper: Decimal | None) -> ValueRange | None:
    if lower is None and upper is None:
        return None
    return ValueRange(lower=lower, upper=upper)


class SpotSearchCompiler:
    """
    Compiles search parameters into a SpotQuery

    Usage:
        query = SpotSearchCompiler().compile(request.query_params)
        spots = store.query_spots(query.spot_filter, query.limit, query.offset)

    Raises:
        ValidationError: carrying one message per failing parameter
    """

    def __init__(self, max_size: int = MAX_PAGE_SIZE):
        self.max_size = max_size

    def compile(self, params: Mapping[str, Any]) -> SpotQuery:
        errors = FieldErrors()

        page = self._integer(params, 'page', DEFAULT_PAGE, errors, PAGE_INVALID)
        size = self._integer(params, 'size', self.max_size, errors, SIZE_INVALID)

        # The cap is applied before validation, so only the lower bound can fail.
        if size is not None and size > self.max_size:
            size = self.max_size

        if page is not None and page < 1:
            errors.add('page', PAGE_INVALID)
        if size is not None and size < 1:
            errors.add('size', SIZE_INVALID)
        if 'page' not in errors and 'size' not in errors and size * page > MAX_OFFSET:
            errors.add('page', PAGE_INVALID)

        lat = self._coordinate_range(
            params, errors, MAX_LATITUDE,
            ('minLat', MIN_LAT_INVALID), ('maxLat', MAX_LAT_INVALID),
        )
        lng = self._coordinate_range(
            params, errors, MAX_LONGITUDE,
            ('minLng', MIN_LNG_INVALID), ('maxLng', MAX_LNG_INVALID),
        )
        price = self._price_range(params, errors)

        errors.raise_if_any()

        return SpotQuery(
            spot_filter=SpotFilter(lat=lat, lng=lng, price=price),
            page=page,
            size=size,
        )

    def _integer(self, params, name: str, default: int, errors: FieldErrors, message: str) -> int | None:
        raw = _raw(params, name)
        if raw is None:
            return default
        if not _INTEGER.fullmatch(raw):
            errors.add(name, message)
            return None
        return int(raw)

    def _number(self, params, name: str, errors: FieldErrors, message: str) -> Decimal | None:
        raw = _raw(params, name)
        if raw is None:
            return None
        if not _NUMBER.fullmatch(raw):
            errors.add(name, message)
            return None
        return Decimal(raw)

    def _coordinate_range(self, params, errors: FieldErrors, limit: Decimal, lower_field, upper_field):
        lower_name, lower_message = lower_field
        upper_name, upper_message = upper_field

        lower = self._number(params, lower_name, errors, lower_message)
        upper = self._number(params, upper_name, errors, upper_message)

        if lower is not None and not -limit <= lower <= limit:
            errors.add(lower_name, lower_message)
        if upper is not None and not -limit <= upper <= limit:
            errors.add(upper_name, upper_message)
        if lower is not None and upper is not None and upper < lower:
            errors.add(upper_name, upper_message)
            errors.add(lower_name, lower_message)

        if lower_name in errors or upper_name in errors:
            return None
        return _bounds(lower, upper)

    def _price_range(self, params, errors: FieldErrors):
        lower = self._number(params, 'minPrice', errors, MIN_PRICE_INVALID)
        upper = self._number(params, 'maxPrice', errors, MAX_PRICE_INVALID)

        if lower is not None and lower < 0:
            errors.add('minPrice', MIN_PRICE_INVALID)
        if upper is not None and upper < 0:
            errors.add('maxPrice', MAX_PRICE_INVALID)

        if 'minPrice' in errors or 'maxPrice' in errors:
            return None
        return _bounds(lower, upper)
