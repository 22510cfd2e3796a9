"""Order payload generation tests."""

import json
import random

import pytest

import gen_orders
from gen_orders import (
    ORDER_NAME,
    generate_order,
    generate_orders,
    inject_invalid_data,
    lookup_order_id,
    order_path,
    seed_order,
)


def _is_valid(order):
    return (
        isinstance(order.get("order_id"), int)
        and order["order_id"] >= 0
        and isinstance(order.get("name"), str)
        and isinstance(order.get("transport_id"), int)
    )


class TestGenerateOrder:
    """Order creation payloads."""

    def test_has_exactly_three_fields(self):
        """Payload carries order_id, name and transport_id only."""
        assert set(generate_order()) == {"order_id", "name", "transport_id"}

    def test_field_types_survive_json(self):
        """Serialized payload parses back to int/str/int."""
        body = json.loads(json.dumps(generate_order()))
        assert isinstance(body["order_id"], int)
        assert isinstance(body["name"], str)
        assert isinstance(body["transport_id"], int)
        assert body["name"] == ORDER_NAME

    def test_ids_within_bounds(self):
        """order_id in [0, 1_000_000), transport_id in [0, 100_000)."""
        for _ in range(2000):
            order = generate_order()
            assert 0 <= order["order_id"] < 1_000_000
            assert 0 <= order["transport_id"] < 100_000

    def test_upper_bounds_are_exclusive(self, monkeypatch):
        """The largest draw is one below the limit."""
        monkeypatch.setattr(random, "randrange", lambda upper: upper - 1)
        order = generate_order()
        assert order["order_id"] == 999_999
        assert order["transport_id"] == 99_999

    def test_name_is_long_form_text(self):
        assert ORDER_NAME.startswith("Lorem ipsum dolor sit amet")
        assert ORDER_NAME.endswith("Fusce tincidunt pulvinar viverra.")
        assert len(ORDER_NAME) > 500


class TestRandomIds:
    """Id helpers."""

    def test_random_order_id_bounds(self, monkeypatch):
        monkeypatch.setattr(random, "randrange", lambda upper: upper - 1)
        assert gen_orders.random_order_id() == 999_999
        assert gen_orders.random_transport_id() == 99_999
        assert gen_orders.lookup_order_id() == 99_999


class TestLookup:
    """Order retrieval ids and paths."""

    def test_lookup_id_within_bounds(self):
        for _ in range(2000):
            assert 0 <= lookup_order_id() < 100_000

    def test_random_path_has_numeric_final_segment(self):
        for _ in range(200):
            path = order_path()
            assert path.startswith("/orders/")
            assert path.rsplit("/", 1)[1].isdigit()

    def test_explicit_id(self):
        assert order_path(42) == "/orders/42"
        assert order_path(0) == "/orders/0"


class TestSeedOrder:
    """Deterministic test data."""

    def test_seed_order_shape(self):
        assert seed_order(7) == {"order_id": 7, "name": "TestOrder", "transport_id": 2}


class TestInvalidData:
    """Invalid data injection."""

    @pytest.mark.parametrize("choice", gen_orders.INVALID_CHOICES)
    def test_each_corruption_breaks_the_order(self, monkeypatch, choice):
        monkeypatch.setattr(random, "choice", lambda seq: choice)
        order = inject_invalid_data(generate_order())
        assert not _is_valid(order)

    def test_generate_orders_all_invalid(self):
        orders = generate_orders(20, invalid_rate=1.0)
        assert len(orders) == 20
        assert not any(_is_valid(order) for order in orders)

    def test_generate_orders_all_valid(self):
        for order in generate_orders(20, invalid_rate=0.0):
            assert _is_valid(order)


class TestCli:
    """gen_orders command line."""

    def test_writes_json_array(self, tmp_path, capsys):
        output = tmp_path / "mock.json"
        gen_orders.main(["-n", "5", "-o", str(output)])

        orders = json.loads(output.read_text())
        assert len(orders) == 5
        assert all(set(o) == {"order_id", "name", "transport_id"} for o in orders)
        assert "Generated 5 orders (0% invalid)" in capsys.readouterr().out

    def test_rejects_out_of_range_rate(self, tmp_path):
        with pytest.raises(SystemExit):
            gen_orders.main(["--invalid-rate", "1.5", "-o", str(tmp_path / "x.json")])

    def test_rejects_negative_count(self, tmp_path):
        with pytest.raises(SystemExit):
            gen_orders.main(["-n", "-1", "-o", str(tmp_path / "x.json")])
