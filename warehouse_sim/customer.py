"""Customers who place orders with the warehouse."""

from __future__ import annotations

import copy


class Customer:
    """A customer with a location distance and an order limit."""

    def __init__(self, id: int, name: str, location_distance: int, max_orders: int) -> None:
        self.id = id
        self.name = name
        self.location_distance = location_distance
        self.max_orders = max_orders
        self.order_ids: list[int] = []

    @property
    def num_orders(self) -> int:
        """Number of orders placed so far."""
        return len(self.order_ids)

    def can_make_order(self) -> bool:
        """True while the customer has not reached the order limit."""
        return self.num_orders < self.max_orders

    def add_order(self, order_id: int) -> int:
        """Record an order and return its id.

        Raises ValueError if the customer has reached the order limit.
        """
        if not self.can_make_order():
            raise ValueError(f"customer {self.id} cannot place more orders")
        self.order_ids.append(order_id)
        return order_id

    def clone(self) -> "Customer":
        """Return an independent copy of this customer."""
        twin = copy.copy(self)
        twin.order_ids = list(self.order_ids)
        return twin

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(id={self.id!r}, name={self.name!r}, "
            f"location_distance={self.location_distance!r}, max_orders={self.max_orders!r})"
        )


class SoldierCustomer(Customer):
    """A soldier customer."""


class CivilianCustomer(Customer):
    """A civilian customer."""