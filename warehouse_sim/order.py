"""Orders placed by customers and their progress through the warehouse."""

from __future__ import annotations

import copy
import enum
from dataclasses import dataclass
from typing import Optional


class OrderStatus(enum.Enum):
    """Stage an order has reached."""

    PENDING = "PENDING"
    COLLECTING = "COLLECTING"
    DELIVERING = "DELIVERING"
    COMPLETED = "COMPLETED"

    def __str__(self) -> str:
        return self.value


@dataclass
class Order:
    """A single order for a customer at a given distance.

    ``collector_id`` and ``driver_id`` are ``None`` until a volunteer
    of that kind has been assigned.
    """

    id: int
    customer_id: int
    distance: int
    status: OrderStatus = OrderStatus.PENDING
    collector_id: Optional[int] = None
    driver_id: Optional[int] = None

    def clone(self) -> "Order":
        """Return an independent copy of this order."""
        return copy.copy(self)

    def __str__(self) -> str:
        return "Order"