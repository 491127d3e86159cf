"""Volunteers who collect and deliver orders."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from typing import Optional

from warehouse_sim.order import Order, OrderStatus


class Volunteer(ABC):
    """Base class for every volunteer.

    ``active_order_id`` is ``None`` while idle; ``completed_order_id`` is
    set to the active order once the volunteer finishes it.
    """

    def __init__(self, id: int, name: str) -> None:
        self.id = id
        self.name = name
        self.active_order_id: Optional[int] = None
        self.completed_order_id: Optional[int] = None

    @property
    def is_busy(self) -> bool:
        """True while the volunteer is processing an order."""
        return self.active_order_id is not None

    @abstractmethod
    def has_orders_left(self) -> bool:
        """True while the volunteer has not reached its order limit."""

    @abstractmethod
    def can_take_order(self, order: Order) -> bool:
        """True if the volunteer can take the given order now."""

    @abstractmethod
    def accept_order(self, order: Order) -> None:
        """Start working on the given order."""

    @abstractmethod
    def step(self) -> None:
        """Advance one time unit; mark the order completed when done."""

    def clone(self) -> "Volunteer":
        """Return an independent copy of this volunteer."""
        return copy.copy(self)

    def __str__(self) -> str:
        return type(self).__name__


class CollectorVolunteer(Volunteer):
    """Collects orders; each takes ``cool_down`` steps."""

    def __init__(self, id: int, name: str, cool_down: int) -> None:
        super().__init__(id, name)
        self.cool_down = cool_down
        self.time_left = 0

    def decrease_cool_down(self) -> bool:
        """Decrease the time left by one; True once it reaches zero."""
        self.time_left -= 1
        return self.time_left == 0

    def has_orders_left(self) -> bool:
        return True

    def can_take_order(self, order: Order) -> bool:
        return (
            not self.is_busy
            and self.has_orders_left()
            and order.status is OrderStatus.PENDING
        )

    def accept_order(self, order: Order) -> None:
        self.active_order_id = order.id
        self.time_left = self.cool_down

    def step(self) -> None:
        if self.decrease_cool_down():
            self.completed_order_id = self.active_order_id


class LimitedCollectorVolunteer(CollectorVolunteer):
    """A collector who may handle at most ``max_orders`` orders."""

    def __init__(self, id: int, name: str, cool_down: int, max_orders: int) -> None:
        super().__init__(id, name, cool_down)
        self.max_orders = max_orders
        self.orders_left = max_orders

    def has_orders_left(self) -> bool:
        return self.orders_left > 0

    def accept_order(self, order: Order) -> None:
        self.orders_left -= 1
        self.active_order_id = order.id
        self.completed_order_id = None
        self.time_left = self.cool_down


class DriverVolunteer(Volunteer):
    """Delivers collected orders within ``max_distance``."""

    def __init__(self, id: int, name: str, max_distance: int, distance_per_step: int) -> None:
        super().__init__(id, name)
        self.max_distance = max_distance
        self.distance_per_step = distance_per_step
        self.distance_left = 0

    def decrease_distance_left(self) -> bool:
        """Drive one step; True once no distance is left."""
        self.distance_left -= self.distance_per_step
        return self.distance_left <= 0

    def has_orders_left(self) -> bool:
        return True

    def can_take_order(self, order: Order) -> bool:
        return (
            not self.is_busy
            and self.has_orders_left()
            and order.distance <= self.max_distance
            and order.status is OrderStatus.COLLECTING
        )

    def accept_order(self, order: Order) -> None:
        self.active_order_id = order.id
        self.distance_left = order.distance
        self.completed_order_id = None

    def step(self) -> None:
        if self.decrease_distance_left():
            self.completed_order_id = self.active_order_id


class LimitedDriverVolunteer(DriverVolunteer):
    """A driver who may handle at most ``max_orders`` orders."""

    def __init__(
        self,
        id: int,
        name: str,
        max_distance: int,
        distance_per_step: int,
        max_orders: int,
    ) -> None:
        super().__init__(id, name, max_distance, distance_per_step)
        self.max_orders = max_orders
        self.orders_left = max_orders

    def has_orders_left(self) -> bool:
        return self.orders_left > 0

    def accept_order(self, order: Order) -> None:
        self.orders_left -= 1
        self.active_order_id = order.id
        self.completed_order_id = None
        self.distance_left = order.distance