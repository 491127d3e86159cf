"""The warehouse: customers, volunteers, orders and the actions log."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Iterable, Optional, Union

from warehouse_sim.customer import CivilianCustomer, Customer, SoldierCustomer
from warehouse_sim.order import Order
from warehouse_sim.volunteer import (
    CollectorVolunteer,
    DriverVolunteer,
    LimitedCollectorVolunteer,
    LimitedDriverVolunteer,
    Volunteer,
)

_CUSTOMER_KINDS = {
    "soldier": SoldierCustomer,
    "civilian": CivilianCustomer,
}

# Number of integer fields each volunteer kind reads after its type.
_VOLUNTEER_KINDS = {
    "collector": (CollectorVolunteer, 1),
    "limited_collector": (LimitedCollectorVolunteer, 2),
    "driver": (DriverVolunteer, 2),
    "limited_driver": (LimitedDriverVolunteer, 3),
}


def _ints(fields: Iterable[str], count: int, line_no: int) -> list[int]:
    values = list(fields)[:count]
    if len(values) < count:
        raise ValueError(f"line {line_no}: expected {count} numeric fields")
    try:
        return [int(value) for value in values]
    except ValueError:
        raise ValueError(f"line {line_no}: expected numbers, got {values!r}") from None


class WareHouse:
    """Holds every customer, volunteer and order, and the log of actions."""

    def __init__(self, config_path: Optional[Union[str, Path]] = None) -> None:
        self.is_open = False
        self.actions_log: list[Any] = []
        self.volunteers: list[Volunteer] = []
        self.pending_orders: list[Order] = []
        self.in_process_orders: list[Order] = []
        self.completed_orders: list[Order] = []
        self.customers: list[Customer] = []
        self.customer_counter = 0
        self.volunteer_counter = 0
        self.order_counter = 0
        if config_path is not None:
            self.parse_config(config_path)

    def parse_config(self, config_path: Union[str, Path]) -> None:
        """Load customers and volunteers from a configuration file.

        Lines that start with neither ``customer`` nor ``volunteer`` are
        ignored; unknown customer or volunteer types are reported on
        stderr and skipped. Raises OSError if the file cannot be read and
        ValueError for a line with missing or non-numeric fields.
        """
        with open(config_path, encoding="utf-8") as config_file:
            lines = config_file.read().splitlines()

        self.customer_counter = 0
        self.volunteer_counter = 0
        for line_no, line in enumerate(lines, start=1):
            tokens = line.split()
            if not tokens:
                continue
            kind, args = tokens[0], tokens[1:]
            if kind == "customer":
                self._parse_customer(args, line_no)
            elif kind == "volunteer":
                self._parse_volunteer(args, line_no)

    def _parse_customer(self, args: list[str], line_no: int) -> None:
        if len(args) < 2:
            raise ValueError(f"line {line_no}: incomplete customer entry")
        name, customer_type = args[0], args[1]
        cls = _CUSTOMER_KINDS.get(customer_type)
        if cls is None:
            print(f"Unknown customer type: {customer_type}", file=sys.stderr)
            return
        distance, max_orders = _ints(args[2:], 2, line_no)
        self.add_customer(cls(len(self.customers), name, distance, max_orders))

    def _parse_volunteer(self, args: list[str], line_no: int) -> None:
        if len(args) < 2:
            raise ValueError(f"line {line_no}: incomplete volunteer entry")
        name, volunteer_type = args[0], args[1]
        entry = _VOLUNTEER_KINDS.get(volunteer_type)
        if entry is None:
            print(f"Volunteer type unknown : {volunteer_type}", file=sys.stderr)
            return
        cls, count = entry
        numbers = _ints(args[2:], count, line_no)
        self.volunteers.append(cls(len(self.volunteers), name, *numbers))
        self.volunteer_counter += 1

    def add_order(self, order: Order) -> None:
        """Queue a new order as pending."""
        self.pending_orders.append(order)
        self.order_counter += 1

    def add_customer(self, customer: Customer) -> None:
        """Register a new customer."""
        self.customers.append(customer)
        self.customer_counter += 1

    def add_action(self, action: Any) -> None:
        """Perform an action on this warehouse and record it in the log."""
        action.act(self)
        self.actions_log.append(action)

    def get_customer(self, customer_id: int) -> Customer:
        """Return the customer with the given id; KeyError if absent."""
        for customer in self.customers:
            if customer.id == customer_id:
                return customer
        raise KeyError(f"no customer with id {customer_id}")

    def get_volunteer(self, volunteer_id: int) -> Volunteer:
        """Return the volunteer with the given id; KeyError if absent."""
        for volunteer in self.volunteers:
            if volunteer.id == volunteer_id:
                return volunteer
        raise KeyError(f"no volunteer with id {volunteer_id}")

    def get_order(self, order_id: int) -> Order:
        """Return the order with the given id from any stage; KeyError if absent."""
        for orders in (self.pending_orders, self.in_process_orders, self.completed_orders):
            for order in orders:
                if order.id == order_id:
                    return order
        raise KeyError(f"no order with id {order_id}")

    def open(self) -> None:
        """Announce and mark the warehouse as open."""
        print("Warehouse is open!")
        self.is_open = True

    def close(self) -> None:
        """Mark the warehouse as closed."""
        self.is_open = False

    @staticmethod
    def _move(order_id: int, source: list[Order], target: list[Order]) -> None:
        for order in source:
            if order.id == order_id:
                source.remove(order)
                target.append(order)
                return

    def pending_to_in_process(self, order_id: int) -> None:
        """Move an order from pending to in process, if it is pending."""
        self._move(order_id, self.pending_orders, self.in_process_orders)

    def in_process_to_pending(self, order_id: int) -> None:
        """Move an order from in process back to pending, if it is in process."""
        self._move(order_id, self.in_process_orders, self.pending_orders)

    def in_process_to_completed(self, order_id: int) -> None:
        """Move an order from in process to completed, if it is in process."""
        self._move(order_id, self.in_process_orders, self.completed_orders)

    def delete_volunteer(self, volunteer: Volunteer) -> None:
        """Remove the volunteer with the same id as the one given."""
        for candidate in self.volunteers:
            if candidate.id == volunteer.id:
                self.volunteers.remove(candidate)
                return

    def clone(self) -> "WareHouse":
        """Return a deep, independent copy of this warehouse."""
        twin = WareHouse()
        twin.is_open = self.is_open
        twin.customer_counter = self.customer_counter
        twin.volunteer_counter = self.volunteer_counter
        twin.order_counter = self.order_counter
        twin.actions_log = [action.clone() for action in self.actions_log]
        twin.volunteers = [volunteer.clone() for volunteer in self.volunteers]
        twin.pending_orders = [order.clone() for order in self.pending_orders]
        twin.in_process_orders = [order.clone() for order in self.in_process_orders]
        twin.completed_orders = [order.clone() for order in self.completed_orders]
        twin.customers = [customer.clone() for customer in self.customers]
        return twin

    def restore_from(self, other: "WareHouse") -> None:
        """Take over the whole state of ``other``, leaving it empty."""
        if other is self:
            return
        self.is_open = other.is_open
        self.actions_log = other.actions_log
        self.volunteers = other.volunteers
        self.pending_orders = other.pending_orders
        self.in_process_orders = other.in_process_orders
        self.completed_orders = other.completed_orders
        self.customers = other.customers
        self.customer_counter = other.customer_counter
        self.volunteer_counter = other.volunteer_counter
        self.order_counter = other.order_counter

        other.is_open = False
        other.actions_log = []
        other.volunteers = []
        other.pending_orders = []
        other.in_process_orders = []
        other.completed_orders = []
        other.customers = []
        other.customer_counter = 0
        other.volunteer_counter = 0
        other.order_counter = 0