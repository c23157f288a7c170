from decimal import Decimal as D

import pytest

from brookspa.market import Direction, Exchange, SecurityId
from brookspa.order import Order, OrderStatus, OrderType


def sec():
    return SecurityId.etf("510050", Exchange.SH)


def test_market_order():
    order = Order.market(sec(), Direction.LONG, 100)
    assert order.order_type == OrderType.MARKET
    assert order.quantity == 100
    assert order.price is None
    assert order.status == OrderStatus.PENDING
    assert order.is_active()
    assert not order.is_terminal()


def test_limit_order():
    order = Order.limit(sec(), Direction.LONG, 200, D("3.100"))
    assert order.order_type == OrderType.LIMIT
    assert order.price == D("3.100")


def test_stop_order():
    order = Order.stop(sec(), Direction.SHORT, 100, D("3.050"))
    assert order.order_type == OrderType.STOP
    assert order.stop_price == D("3.050")


def test_remaining_quantity():
    order = Order.market(sec(), Direction.LONG, 300)
    order.filled_quantity = 100
    assert order.remaining_quantity() == 200


def test_remaining_quantity_saturates():
    order = Order.market(sec(), Direction.LONG, 100)
    order.filled_quantity = 150
    assert order.remaining_quantity() == 0


def test_terminal_states():
    order = Order.market(sec(), Direction.LONG, 100)
    order.status = OrderStatus.FILLED
    assert order.is_terminal()
    assert not order.is_active()


@pytest.mark.parametrize("status", list(OrderStatus))
def test_active_and_terminal_are_exclusive(status):
    order = Order.market(sec(), Direction.LONG, 100)
    order.status = status
    assert order.is_active() != order.is_terminal()


def test_orders_get_distinct_ids():
    a = Order.market(sec(), Direction.LONG, 100)
    b = Order.market(sec(), Direction.LONG, 100)
    assert a.id != b.id
    assert a.filled_quantity == 0 and a.filled_at is None