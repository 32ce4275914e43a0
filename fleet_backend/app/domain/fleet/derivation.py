"""
Trip and fuel financial derivation.

Pure functions that turn the raw figures of a trip or fuel request into the
derived fields stored next to them. Nothing here raises: a value that cannot
be read as a number falls back to a default, so a sloppy form never blocks
a write.
"""

import math
from dataclasses import dataclass, asdict
from typing import Any, Optional

from fleet_backend.app.models.enums import TripStatus


def parse_number(value: Any, default: float = 0.0) -> float:
    """
    Read ``value`` as a float.

    Accepts ints, floats and numeric strings (surrounding whitespace
    allowed). ``None``, booleans, blank or malformed strings, NaN,
    infinities and ints too large for a float return ``default``.
    """
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        raw = value
    elif isinstance(value, str):
        raw = value.strip()
        if not raw:
            return default
    else:
        return default

    try:
        number = float(raw)
    except (ValueError, OverflowError):
        # ints beyond the float range overflow
        return default

    if math.isnan(number) or math.isinf(number):
        return default
    return number


def parse_optional_number(value: Any) -> Optional[float]:
    """Same as :func:`parse_number` but keeps "absent" as ``None``."""
    return parse_number(value, default=None)


@dataclass(frozen=True)
class TripFinancials:
    """Derived figures of a trip, keyed by column name."""
    start_odometer: Optional[float]
    end_odometer: Optional[float]
    distance: Optional[float]
    price: float
    fuel_cost: float
    driver_cost: float
    other_costs: float
    total_costs: float
    profit: float
    profit_margin: float

    def as_columns(self) -> dict:
        return asdict(self)


def trip_distance(start_odometer: Any, end_odometer: Any) -> Optional[float]:
    """Kilometres driven, or ``None`` unless both readings are present."""
    start = parse_optional_number(start_odometer)
    end = parse_optional_number(end_odometer)
    if start is None or end is None:
        return None
    return end - start


def profit_margin(profit: float, price: float) -> float:
    """Profit as a percentage of price; 0 when there is no positive price."""
    if price <= 0:
        return 0.0
    return profit / price * 100


def derive_trip_financials(
    start_odometer: Any = None,
    end_odometer: Any = None,
    price: Any = None,
    fuel_cost: Any = None,
    driver_cost: Any = None,
    other_costs: Any = None,
) -> TripFinancials:
    """
    Compute distance, total costs, profit and profit margin of a trip.

    Example:
        >>> f = derive_trip_financials(1000, 1450, 500, 80, 50, 20)
        >>> (f.distance, f.total_costs, f.profit, f.profit_margin)
        (450.0, 150.0, 350.0, 70.0)
    """
    price_value = parse_number(price)
    fuel = parse_number(fuel_cost)
    driver = parse_number(driver_cost)
    other = parse_number(other_costs)

    total_costs = fuel + driver + other
    profit = price_value - total_costs

    return TripFinancials(
        start_odometer=parse_optional_number(start_odometer),
        end_odometer=parse_optional_number(end_odometer),
        distance=trip_distance(start_odometer, end_odometer),
        price=price_value,
        fuel_cost=fuel,
        driver_cost=driver,
        other_costs=other,
        total_costs=total_costs,
        profit=profit,
        profit_margin=profit_margin(profit, price_value),
    )


def trip_status(end_time: Any) -> str:
    """A trip with an end time is completed, otherwise it is still running."""
    if end_time:
        return TripStatus.COMPLETED.value
    return TripStatus.ACTIVE.value


def derive_fuel_total(liters: Any, price_per_liter: Any) -> float:
    """Total cost of a refuel. Missing or malformed inputs count as 0."""
    return parse_number(liters) * parse_number(price_per_liter)
