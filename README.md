# warehouse_sim

A small interactive simulation of a warehouse staffed by volunteers.
Customers place orders. Collectors pick each order up and drivers deliver
it. The simulation moves forward in whole steps.

## Installation

```
pip install .
```

To run the tests, install the `test` extra (`pip install .[test]`) and run `pytest`.

## Running

```
warehouse path/to/config.txt
```

The program reads commands from standard input. It stops when a `close`
command is given or when the input ends.

If you do not give exactly one configuration path, the program prints
`usage: warehouse <config_path>` and exits. If it cannot open the file, it
prints an error on stderr and starts with an empty warehouse. If a
customer or volunteer line has missing or non-numeric fields, it reports
the line on stderr and exits with status 1.

## Configuration file

Each line describes a customer or a volunteer. The program ignores blank
lines and lines of any other kind.

```
customer Moshe soldier 3 2
customer Ron civilian 6 4
volunteer Tamar collector 2
volunteer Ni limited_collector 3 2
volunteer Din driver 7 4
volunteer Limor limited_driver 8 2 2
```

- `customer <name> <soldier|civilian> <distance> <max_orders>`
- `volunteer <name> collector <cool_down>`
- `volunteer <name> limited_collector <cool_down> <max_orders>`
- `volunteer <name> driver <max_distance> <distance_per_step>`
- `volunteer <name> limited_driver <max_distance> <distance_per_step> <max_orders>`

If a customer or volunteer type is unknown, the program reports it on
stderr and skips the line. Customers and volunteers get ids starting at 0,
in the order they appear in the file.

## How a step works

A single step has three stages:

1. Each pending order goes to the first volunteer who can take it. A free
   collector takes a `PENDING` order, and the order becomes `COLLECTING`.
   A free driver takes a `COLLECTING` order that lies within its
   `max_distance`, and the order becomes `DELIVERING`.
2. Every volunteer who is working on an order advances by one step. A
   collector counts down its `cool_down`. A driver subtracts its
   `distance_per_step`.
3. When a collector finishes an order, the order goes back to the pending
   list so that a driver can pick it up. When a driver finishes an order,
   the order becomes `COMPLETED`. A limited volunteer who has no orders
   left is then removed from the warehouse.

## Commands

At the `Enter action:` prompt you can type:

| Command | Effect |
|---|---|
| `step <n>` | Advance the simulation by `n` steps |
| `order <customer_id>` | Place a new order for a customer |
| `customer <name> <soldier\|civilian> <distance> <max_orders>` | Add a customer; any type other than `soldier` makes a civilian |
| `orderStatus <order_id>` | Show an order's status, customer, collector and driver |
| `customerStatus <customer_id>` | Show a customer's orders and how many more orders they may place |
| `volunteerStatus <volunteer_id>` | Show whether a volunteer is busy, the time left and the orders left |
| `log` | List every action taken so far, each followed by `COMPLETED` or `ERROR` |
| `backup` | Save a copy of the warehouse, replacing any earlier copy |
| `restore` | Replace the warehouse with a copy of the saved backup |
| `close` | Print every order with its status and stop |

If the command word is not recognised, the program prints `try again!`.
If a known command has arguments that cannot be read, the program ignores
the line.

Some commands fail and print a message:

- `Cannot place this order`: the customer does not exist or has reached
  `max_orders`.
- `Order doesn't exist` and `Customer doesn't exist`: the id given is
  unknown.
- `Volunteer doesn’t exist`: the id given is unknown, or that volunteer
  has been removed.
- `No backup available`: `restore` was given before any `backup`.

## Using it as a library

```python
from warehouse_sim.warehouse import WareHouse
from warehouse_sim.cli import parse_command, run

wh = WareHouse("config.txt")
run(wh, ["order 0", "step 3", "orderStatus 0", "close"])
```

`parse_command(line)` turns one command line into an action. It returns
`None` when the arguments of a known command cannot be read, and it raises
`ValueError` for an unknown or empty command.

`warehouse_sim.actions` provides the actions themselves: `SimulateStep`,
`AddOrder`, `AddCustomer`, `PrintOrderStatus`, `PrintCustomerStatus`,
`PrintVolunteerStatus`, `PrintActionsLog`, `Close`, `BackupWareHouse` and
`RestoreWareHouse`. `WareHouse.add_action(action)` runs an action and
records it in `actions_log`.

The other modules hold the model:

- `warehouse_sim.warehouse.WareHouse`: customers, volunteers and the
  pending, in-process and completed orders. `get_customer`,
  `get_volunteer` and `get_order` raise `KeyError` for an unknown id.
  `clone()` returns a deep copy.
- `warehouse_sim.order`: `Order` and `OrderStatus`.
- `warehouse_sim.customer`: `Customer`, `SoldierCustomer` and
  `CivilianCustomer`.
- `warehouse_sim.volunteer`: `CollectorVolunteer`,
  `LimitedCollectorVolunteer`, `DriverVolunteer` and
  `LimitedDriverVolunteer`.

## What it does not do

Backups are held in memory only. A process has a single backup, which
every `backup` and `restore` action shares, and the backup is discarded
when `warehouse` exits. The program never writes the warehouse state to
disk.