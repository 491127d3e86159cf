"""Interactive command loop and entry point for the warehouse simulation."""

from __future__ import annotations

import re
import sys
from typing import Callable, Iterable, Optional, Sequence

from warehouse_sim import actions
from warehouse_sim.actions import (
    AddCustomer,
    AddOrder,
    BackupWareHouse,
    BaseAction,
    Close,
    PrintActionsLog,
    PrintCustomerStatus,
    PrintOrderStatus,
    PrintVolunteerStatus,
    RestoreWareHouse,
    SimulateStep,
)
from warehouse_sim.warehouse import WareHouse

PROMPT = "Enter action: "
USAGE = "usage: warehouse <config_path>"

_LEADING_INT = re.compile(r"[+-]?\d+")


def _leading_int(token: str) -> Optional[int]:
    """Read an integer from the start of a token, as stream extraction does."""
    match = _LEADING_INT.match(token)
    return int(match.group()) if match else None


def _one_int(args: list[str], factory: Callable[[int], BaseAction]) -> Optional[BaseAction]:
    if not args:
        return None
    number = _leading_int(args[0])
    return None if number is None else factory(number)


def _customer(args: list[str]) -> Optional[BaseAction]:
    if len(args) < 4:
        return None
    name, customer_type = args[0], args[1]
    distance = _leading_int(args[2])
    max_orders = _leading_int(args[3])
    if distance is None or max_orders is None:
        return None
    return AddCustomer(name, customer_type, distance, max_orders)


_NUMERIC_COMMANDS: dict[str, Callable[[int], BaseAction]] = {
    "step": SimulateStep,
    "order": AddOrder,
    "orderStatus": PrintOrderStatus,
    "customerStatus": PrintCustomerStatus,
    "volunteerStatus": PrintVolunteerStatus,
}

_PLAIN_COMMANDS: dict[str, Callable[[], BaseAction]] = {
    "log": PrintActionsLog,
    "close": Close,
    "backup": BackupWareHouse,
    "restore": RestoreWareHouse,
}


def parse_command(line: str) -> Optional[BaseAction]:
    """Turn one input line into an action.

    Returns None when the command is known but its arguments cannot be
    read; raises ValueError for an unknown or empty command.
    """
    tokens = line.split()
    if not tokens:
        raise ValueError("empty command")
    command, args = tokens[0], tokens[1:]
    if command in _NUMERIC_COMMANDS:
        return _one_int(args, _NUMERIC_COMMANDS[command])
    if command == "customer":
        return _customer(args)
    if command in _PLAIN_COMMANDS:
        return _PLAIN_COMMANDS[command]()
    raise ValueError(f"unknown command: {command}")


def run(warehouse: WareHouse, lines: Iterable[str]) -> None:
    """Open the warehouse and perform commands until it closes or input ends."""
    warehouse.open()
    source = iter(lines)
    while warehouse.is_open:
        print(PROMPT, end="")
        line = next(source, None)
        if line is None:
            break
        try:
            action = parse_command(line)
        except ValueError:
            print("try again!")
            continue
        if action is not None:
            warehouse.add_action(action)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the simulation on the configuration file named in ``argv``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print(USAGE)
        return 0
    try:
        warehouse = WareHouse(args[0])
    except OSError:
        print("Error opening the configuration file.", file=sys.stderr)
        warehouse = WareHouse()
    except ValueError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 1
    try:
        run(warehouse, sys.stdin)
    finally:
        actions._backup = None
    return 0


if __name__ == "__main__":
    sys.exit(main())