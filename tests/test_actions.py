import pytest

from warehouse_sim import actions
from warehouse_sim.actions import (
    ActionStatus,
    AddCustomer,
    AddOrder,
    BackupWareHouse,
    Close,
    CustomerType,
    PrintActionsLog,
    PrintCustomerStatus,
    PrintOrderStatus,
    PrintVolunteerStatus,
    RestoreWareHouse,
    SimulateStep,
)
from warehouse_sim.customer import CivilianCustomer, SoldierCustomer
from warehouse_sim.order import Order, OrderStatus
from warehouse_sim.volunteer import (
    CollectorVolunteer,
    DriverVolunteer,
    LimitedCollectorVolunteer,
    LimitedDriverVolunteer,
)
from warehouse_sim.warehouse import WareHouse


def make_warehouse(*volunteers, customers=()):
    wh = WareHouse()
    for customer in customers:
        wh.add_customer(customer)
    for volunteer in volunteers:
        wh.volunteers.append(volunteer)
        wh.volunteer_counter += 1
    return wh


@pytest.fixture
def no_backup(monkeypatch):
    monkeypatch.setattr(actions, "_backup", None)


def test_customer_type_from_string():
    assert CustomerType.from_string("soldier") is CustomerType.SOLDIER
    assert CustomerType.from_string("civilian") is CustomerType.CIVILIAN
    assert CustomerType.from_string("anything") is CustomerType.CIVILIAN


def test_add_customer_soldier():
    wh = make_warehouse()
    action = AddCustomer("bob", "soldier", 3, 2)
    action.act(wh)
    assert action.status is ActionStatus.COMPLETED
    customer = wh.get_customer(0)
    assert isinstance(customer, SoldierCustomer)
    assert customer.name == "bob"
    assert wh.customer_counter == 1
    assert str(action) == "customer bob soldier 3 2 COMPLETED"


def test_add_customer_unknown_type_becomes_civilian():
    wh = make_warehouse()
    action = AddCustomer("amy", "pilot", 4, 1)
    action.act(wh)
    assert isinstance(wh.get_customer(0), CivilianCustomer)
    assert str(action) == "customer amy civilian 4 1 COMPLETED"


def test_add_order_success():
    wh = make_warehouse(customers=[CivilianCustomer(0, "alice", 5, 2)])
    action = AddOrder(0)
    action.act(wh)
    assert action.status is ActionStatus.COMPLETED
    assert [o.id for o in wh.pending_orders] == [0]
    assert wh.pending_orders[0].distance == 5
    assert wh.get_customer(0).order_ids == [0]
    assert str(action) == "Order 0 COMPLETED"


def test_add_order_unknown_customer(capsys):
    wh = make_warehouse()
    action = AddOrder(5)
    action.act(wh)
    assert action.status is ActionStatus.ERROR
    assert action.error_message == "Cannot place this order"
    assert capsys.readouterr().out == "Cannot place this order\n"
    assert str(action) == "Order 5 ERROR"
    assert wh.order_counter == 0


def test_add_order_respects_customer_limit():
    wh = make_warehouse(customers=[SoldierCustomer(0, "bob", 5, 1)])
    first, second = AddOrder(0), AddOrder(0)
    first.act(wh)
    second.act(wh)
    assert first.status is ActionStatus.COMPLETED
    assert second.status is ActionStatus.ERROR
    assert wh.order_counter == 1


def test_full_cycle_step_by_step():
    collector = CollectorVolunteer(0, "carl", 2)
    driver = DriverVolunteer(1, "erin", 10, 5)
    wh = make_warehouse(collector, driver, customers=[CivilianCustomer(0, "alice", 5, 2)])
    AddOrder(0).act(wh)
    order = wh.get_order(0)

    SimulateStep(1).act(wh)
    assert order.status is OrderStatus.COLLECTING
    assert order.collector_id == collector.id
    assert wh.in_process_orders == [order]

    SimulateStep(1).act(wh)
    assert wh.pending_orders == [order]
    assert order.status is OrderStatus.COLLECTING
    assert not collector.is_busy

    step = SimulateStep(1)
    step.act(wh)
    assert wh.completed_orders == [order]
    assert order.status is OrderStatus.COMPLETED
    assert order.driver_id == driver.id
    assert not driver.is_busy
    assert str(step) == "simulateStep 1 COMPLETED"


def test_many_steps_match_single_steps():
    def build():
        wh = make_warehouse(
            CollectorVolunteer(0, "carl", 2),
            DriverVolunteer(1, "erin", 10, 5),
            customers=[CivilianCustomer(0, "alice", 5, 3)],
        )
        AddOrder(0).act(wh)
        AddOrder(0).act(wh)
        return wh

    bulk, single = build(), build()
    SimulateStep(5).act(bulk)
    for _ in range(5):
        SimulateStep(1).act(single)
    assert [(o.id, o.status) for o in bulk.completed_orders] == [
        (o.id, o.status) for o in single.completed_orders
    ]
    assert [(o.id, o.status) for o in bulk.pending_orders + bulk.in_process_orders] == [
        (o.id, o.status) for o in single.pending_orders + single.in_process_orders
    ]


def test_limited_collector_removed_after_last_order():
    collector = LimitedCollectorVolunteer(0, "dana", 1, 1)
    wh = make_warehouse(collector, customers=[CivilianCustomer(0, "alice", 5, 2)])
    AddOrder(0).act(wh)
    SimulateStep(1).act(wh)
    assert wh.volunteers == []
    assert wh.get_order(0) in wh.pending_orders
    assert wh.get_order(0).status is OrderStatus.COLLECTING


def test_driver_does_not_take_far_order():
    driver = DriverVolunteer(0, "erin", 3, 1)
    wh = make_warehouse(driver)
    wh.add_order(Order(0, 0, 8, status=OrderStatus.COLLECTING))
    SimulateStep(2).act(wh)
    assert not driver.is_busy
    assert wh.pending_orders[0].status is OrderStatus.COLLECTING


def test_print_order_status(capsys):
    wh = make_warehouse(customers=[CivilianCustomer(0, "alice", 5, 2)])
    AddOrder(0).act(wh)
    action = PrintOrderStatus(0)
    action.act(wh)
    assert capsys.readouterr().out.splitlines() == [
        "OrderId:0",
        "OrderStatus: PENDING",
        "CustomerID: 0",
        "CollectorID: none",
        "DriverID: none",
    ]
    assert str(action) == "orderStatus 0 COMPLETED"


def test_print_order_status_missing(capsys):
    action = PrintOrderStatus(0)
    action.act(make_warehouse())
    assert action.status is ActionStatus.ERROR
    assert capsys.readouterr().out == "Order doesn't exist\n"
    assert str(action) == "orderStatus 0 ERROR"


def test_print_customer_status(capsys):
    wh = make_warehouse(customers=[CivilianCustomer(0, "alice", 5, 2)])
    AddOrder(0).act(wh)
    capsys.readouterr()
    action = PrintCustomerStatus(0)
    action.act(wh)
    customer = wh.get_customer(0)
    assert capsys.readouterr().out.splitlines() == [
        "CustomerID:0",
        "OrderID: 0",
        "OrderStatus: PENDING",
        f"numOrdersLeft: {customer.max_orders - customer.num_orders}",
    ]
    assert action.status is ActionStatus.COMPLETED


def test_print_customer_status_missing(capsys):
    action = PrintCustomerStatus(3)
    action.act(make_warehouse())
    assert capsys.readouterr().out == "Customer doesn't exist\n"
    assert str(action) == "customerStatus 3 ERROR"


def test_print_volunteer_status_idle_collector(capsys):
    wh = make_warehouse(CollectorVolunteer(0, "carl", 2))
    action = PrintVolunteerStatus(0)
    action.act(wh)
    assert capsys.readouterr().out.splitlines() == [
        "VolunteerID: 0",
        "isBusy: False",
        "OrderID: None",
        "TimeLeft: None",
        "OrdersLeft: no limit",
    ]
    assert str(action) == "volunteerStatus 0 COMPLETED"


def test_print_volunteer_status_busy_limited_driver(capsys):
    driver = LimitedDriverVolunteer(0, "finn", 20, 4, 2)
    wh = make_warehouse(driver)
    wh.add_order(Order(0, 0, 8, status=OrderStatus.COLLECTING))
    SimulateStep(1).act(wh)
    PrintVolunteerStatus(0).act(wh)
    assert capsys.readouterr().out.splitlines() == [
        "VolunteerID: 0",
        "isBusy: True",
        "OrderID: 0",
        f"TimeLeft: {driver.distance_left}",
        f"OrdersLeft:{driver.orders_left}",
    ]


def test_print_volunteer_status_deleted_volunteer(capsys):
    wh = make_warehouse(LimitedCollectorVolunteer(0, "dana", 1, 1),
                        customers=[CivilianCustomer(0, "alice", 5, 2)])
    AddOrder(0).act(wh)
    SimulateStep(1).act(wh)
    action = PrintVolunteerStatus(0)
    action.act(wh)
    assert action.status is ActionStatus.ERROR
    assert capsys.readouterr().out == "Volunteer doesn\u2019t exist\n"


def test_print_actions_log(capsys):
    wh = make_warehouse(customers=[CivilianCustomer(0, "alice", 5, 2)])
    wh.add_action(AddOrder(0))
    wh.add_action(AddOrder(7))
    capsys.readouterr()
    log = PrintActionsLog()
    wh.add_action(log)
    assert capsys.readouterr().out.splitlines() == ["Order 0 COMPLETED", "Order 7 ERROR"]
    assert str(log) == "log COMPLETED"
    assert wh.actions_log[-1] is log


def test_close_reports_and_closes(capsys):
    wh = make_warehouse(customers=[CivilianCustomer(0, "alice", 5, 2)])
    AddOrder(0).act(wh)
    wh.open()
    capsys.readouterr()
    action = Close()
    action.act(wh)
    assert capsys.readouterr().out == "OrderID: 0, CustomerID: 0, Status: PENDING\n\n"
    assert wh.is_open is False
    assert str(action) == "Close COMPLETED"


def test_restore_without_backup(no_backup, capsys):
    action = RestoreWareHouse()
    action.act(make_warehouse())
    assert action.status is ActionStatus.ERROR
    assert capsys.readouterr().out == "No backup available\n"
    assert str(action) == "RestoreWareHouse  ERROR"


def test_backup_and_restore_round_trip(no_backup):
    wh = make_warehouse(customers=[CivilianCustomer(0, "alice", 5, 3)])
    wh.add_action(AddOrder(0))
    backup = BackupWareHouse()
    wh.add_action(backup)
    wh.add_action(AddOrder(0))
    assert wh.order_counter == 2

    restore = RestoreWareHouse()
    wh.add_action(restore)
    assert restore.status is ActionStatus.COMPLETED
    assert str(backup) == "BackupWareHouse COMPLETED"
    assert wh.order_counter == 1
    assert [o.id for o in wh.pending_orders] == [0]
    assert wh.get_customer(0).order_ids == [0]
    assert [str(a) for a in wh.actions_log] == ["Order 0 COMPLETED", "RestoreWareHouse COMPLETED"]


def test_restore_twice_keeps_backup(no_backup):
    wh = make_warehouse(customers=[CivilianCustomer(0, "alice", 5, 3)])
    BackupWareHouse().act(wh)
    AddOrder(0).act(wh)
    RestoreWareHouse().act(wh)
    AddOrder(0).act(wh)
    RestoreWareHouse().act(wh)
    assert wh.order_counter == 0
    assert wh.get_customer(0).order_ids == []


def test_clone_is_independent():
    original = SimulateStep(2)
    original.act(make_warehouse())
    twin = original.clone()
    assert str(twin) == str(original)
    twin.status = ActionStatus.ERROR
    assert original.status is ActionStatus.COMPLETED
    assert str(twin) == "simulateStep 2 ERROR"