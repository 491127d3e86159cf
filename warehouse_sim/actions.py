"""Actions a user performs on the warehouse, each recorded in its log."""

from __future__ import annotations

import copy
import enum
from abc import ABC, abstractmethod
from typing import Optional

from warehouse_sim.customer import CivilianCustomer, SoldierCustomer
from warehouse_sim.order import Order, OrderStatus
from warehouse_sim.volunteer import (
    CollectorVolunteer,
    DriverVolunteer,
    LimitedCollectorVolunteer,
    LimitedDriverVolunteer,
    Volunteer,
)
from warehouse_sim.warehouse import WareHouse

# The single saved copy shared by every backup and restore action.
_backup: Optional[WareHouse] = None


class ActionStatus(enum.Enum):
    """Outcome of an action."""

    COMPLETED = "COMPLETED"
    ERROR = "ERROR"


class CustomerType(enum.Enum):
    """Kind of customer an AddCustomer action creates."""

    SOLDIER = "soldier"
    CIVILIAN = "civilian"

    @classmethod
    def from_string(cls, text: str) -> "CustomerType":
        """``"soldier"`` gives SOLDIER; anything else gives CIVILIAN."""
        return cls.SOLDIER if text == "soldier" else cls.CIVILIAN


class BaseAction(ABC):
    """An action with a status and, on failure, an error message."""

    _error_separator = " "

    def __init__(self) -> None:
        self.status: Optional[ActionStatus] = None
        self.error_message = ""

    def _complete(self) -> None:
        self.status = ActionStatus.COMPLETED

    def _error(self, message: str) -> None:
        self.status = ActionStatus.ERROR
        self.error_message = message
        print(message)

    @abstractmethod
    def act(self, warehouse: WareHouse) -> None:
        """Perform the action on the warehouse."""

    @abstractmethod
    def _describe(self) -> str:
        """The command text this action stands for."""

    def clone(self) -> "BaseAction":
        """Return an independent copy of this action."""
        return copy.copy(self)

    def __str__(self) -> str:
        if self.status is ActionStatus.COMPLETED:
            return f"{self._describe()} COMPLETED"
        return f"{self._describe()}{self._error_separator}ERROR"


class SimulateStep(BaseAction):
    """Advance the simulation a number of time units."""

    def __init__(self, num_of_steps: int) -> None:
        super().__init__()
        self.num_of_steps = num_of_steps

    def act(self, warehouse: WareHouse) -> None:
        for _ in range(self.num_of_steps):
            self._assign_orders(warehouse)
            self._advance_volunteers(warehouse)
            self._collect_finished(warehouse)
        self._complete()

    @staticmethod
    def _assign_orders(warehouse: WareHouse) -> None:
        for order in list(warehouse.pending_orders):
            for volunteer in list(warehouse.volunteers):
                if not volunteer.can_take_order(order):
                    continue
                volunteer.accept_order(order)
                if isinstance(volunteer, CollectorVolunteer):
                    order.status = OrderStatus.COLLECTING
                    order.collector_id = volunteer.id
                elif isinstance(volunteer, DriverVolunteer):
                    order.status = OrderStatus.DELIVERING
                    order.driver_id = volunteer.id
                warehouse.pending_to_in_process(order.id)
                break

    @staticmethod
    def _advance_volunteers(warehouse: WareHouse) -> None:
        for order in list(warehouse.in_process_orders):
            if order.status is OrderStatus.COLLECTING:
                warehouse.get_volunteer(order.collector_id).step()
            elif order.status is OrderStatus.DELIVERING:
                warehouse.get_volunteer(order.driver_id).step()

    @staticmethod
    def _collect_finished(warehouse: WareHouse) -> None:
        for volunteer in list(warehouse.volunteers):
            if volunteer.completed_order_id is None:
                continue
            order_id = volunteer.active_order_id
            if isinstance(volunteer, CollectorVolunteer):
                warehouse.in_process_to_pending(order_id)
            elif isinstance(volunteer, DriverVolunteer):
                warehouse.get_order(order_id).status = OrderStatus.COMPLETED
                warehouse.in_process_to_completed(order_id)
            if volunteer.has_orders_left():
                volunteer.active_order_id = None
                volunteer.completed_order_id = None
            else:
                warehouse.delete_volunteer(volunteer)

    def _describe(self) -> str:
        return f"simulateStep {self.num_of_steps}"


class AddOrder(BaseAction):
    """Place a new order for a customer."""

    def __init__(self, customer_id: int) -> None:
        super().__init__()
        self.customer_id = customer_id

    def act(self, warehouse: WareHouse) -> None:
        if not 0 <= self.customer_id < warehouse.customer_counter:
            self._error("Cannot place this order")
            return
        try:
            customer = warehouse.get_customer(self.customer_id)
        except KeyError:
            self._error("Cannot place this order")
            return
        if not customer.can_make_order():
            self._error("Cannot place this order")
            return
        order = Order(warehouse.order_counter, self.customer_id, customer.location_distance)
        customer.add_order(order.id)
        warehouse.add_order(order)
        self._complete()

    def _describe(self) -> str:
        return f"Order {self.customer_id}"


class AddCustomer(BaseAction):
    """Register a new customer."""

    def __init__(self, customer_name: str, customer_type: str, distance: int, max_orders: int) -> None:
        super().__init__()
        self.customer_name = customer_name
        self.customer_type = CustomerType.from_string(customer_type)
        self.distance = distance
        self.max_orders = max_orders

    def act(self, warehouse: WareHouse) -> None:
        cls = SoldierCustomer if self.customer_type is CustomerType.SOLDIER else CivilianCustomer
        warehouse.add_customer(
            cls(warehouse.customer_counter, self.customer_name, self.distance, self.max_orders)
        )
        self._complete()

    def _describe(self) -> str:
        return (
            f"customer {self.customer_name} {self.customer_type.value} "
            f"{self.distance} {self.max_orders}"
        )


class PrintOrderStatus(BaseAction):
    """Print the state of one order."""

    def __init__(self, order_id: int) -> None:
        super().__init__()
        self.order_id = order_id

    def act(self, warehouse: WareHouse) -> None:
        if not 0 <= self.order_id < warehouse.order_counter:
            self._error("Order doesn't exist")
            return
        order = warehouse.get_order(self.order_id)
        collector = "CollectorID: none" if order.collector_id is None else f"Collector: {order.collector_id}"
        driver = "DriverID: none" if order.driver_id is None else f"DriverID: {order.driver_id}"
        print(
            "\n".join(
                [
                    f"OrderId:{self.order_id}",
                    f"OrderStatus: {order.status}",
                    f"CustomerID: {order.customer_id}",
                    collector,
                    driver,
                ]
            )
        )
        self._complete()

    def _describe(self) -> str:
        return f"orderStatus {self.order_id}"


class PrintCustomerStatus(BaseAction):
    """Print a customer's orders and how many more they may place."""

    def __init__(self, customer_id: int) -> None:
        super().__init__()
        self.customer_id = customer_id

    def act(self, warehouse: WareHouse) -> None:
        if not 0 <= self.customer_id < warehouse.customer_counter:
            self._error("Customer doesn't exist")
            return
        customer = warehouse.get_customer(self.customer_id)
        lines = [f"CustomerID:{self.customer_id}"]
        for order_id in customer.order_ids:
            lines.append(f"OrderID: {order_id}")
            lines.append(f"OrderStatus: {warehouse.get_order(order_id).status}")
        lines.append(f"numOrdersLeft: {customer.max_orders - customer.num_orders}")
        print("\n".join(lines))
        self._complete()

    def _describe(self) -> str:
        return f"customerStatus {self.customer_id}"


class PrintVolunteerStatus(BaseAction):
    """Print the state of one volunteer."""

    def __init__(self, volunteer_id: int) -> None:
        super().__init__()
        self.volunteer_id = volunteer_id

    def act(self, warehouse: WareHouse) -> None:
        if self.volunteer_id >= warehouse.volunteer_counter:
            self._error("Volunteer doesn\u2019t exist")
            return
        volunteer = next((v for v in warehouse.volunteers if v.id == self.volunteer_id), None)
        if volunteer is None:
            self._error("Volunteer doesn\u2019t exist")
            return
        print("\n".join(self._report(volunteer)))
        self._complete()

    @staticmethod
    def _report(volunteer: Volunteer) -> list[str]:
        lines = [f"VolunteerID: {volunteer.id}"]
        if volunteer.is_busy:
            lines += ["isBusy: True", f"OrderID: {volunteer.active_order_id}"]
        else:
            lines += ["isBusy: False", "OrderID: None"]
        if isinstance(volunteer, DriverVolunteer):
            time_left = volunteer.distance_left
        elif isinstance(volunteer, CollectorVolunteer):
            time_left = volunteer.time_left
        else:
            return lines
        lines.append(f"TimeLeft: {time_left}" if volunteer.is_busy else "TimeLeft: None")
        if isinstance(volunteer, (LimitedDriverVolunteer, LimitedCollectorVolunteer)):
            lines.append(f"OrdersLeft:{volunteer.orders_left}")
        else:
            lines.append("OrdersLeft: no limit")
        return lines

    def _describe(self) -> str:
        return f"volunteerStatus {self.volunteer_id}"


class PrintActionsLog(BaseAction):
    """Print every action performed so far."""

    _error_separator = "  "

    def act(self, warehouse: WareHouse) -> None:
        for action in warehouse.actions_log:
            print(action)
        self._complete()

    def _describe(self) -> str:
        return "log"


class Close(BaseAction):
    """Print every order's final state and close the warehouse."""

    _error_separator = "  "

    def act(self, warehouse: WareHouse) -> None:
        report = "".join(
            f"OrderID: {order_id}, CustomerID: {order.customer_id}, Status: {order.status}\n"
            for order_id in range(warehouse.order_counter)
            for order in (warehouse.get_order(order_id),)
        )
        print(report)
        self._complete()
        warehouse.close()

    def _describe(self) -> str:
        return "Close"


class BackupWareHouse(BaseAction):
    """Save a copy of the warehouse, replacing any earlier backup."""

    def act(self, warehouse: WareHouse) -> None:
        global _backup
        _backup = warehouse.clone()
        self._complete()

    def _describe(self) -> str:
        return "BackupWareHouse"


class RestoreWareHouse(BaseAction):
    """Replace the warehouse state with the saved backup."""

    _error_separator = "  "

    def act(self, warehouse: WareHouse) -> None:
        if _backup is None:
            self._error("No backup available")
            return
        warehouse.restore_from(_backup.clone())
        self._complete()

    def _describe(self) -> str:
        return "RestoreWareHouse"