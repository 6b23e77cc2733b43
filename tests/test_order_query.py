"""Tests for the partial UPDATE composer."""

import re

import pytest

from models.order import ORDER_FIELDS, OrderPatch
from repositories.exceptions import EmptyPatchError
from repositories.order_query import ComposedUpdate, UpdateBuilder, compose_update, placeholder

PLACEHOLDER_RE = re.compile(r"%\(p(\d+)\)s")


def placeholder_indices(statement: str) -> list[int]:
    return [int(i) for i in PLACEHOLDER_RE.findall(statement)]


class TestSingleField:
    @pytest.mark.parametrize(
        "field, value",
        [("name", "Ann"), ("coffee_name", "Flat White"), ("size", "L"), ("total", 520)],
    )
    def test_two_placeholders_and_two_values(self, field, value) -> None:
        query = compose_update(7, OrderPatch(**{field: value}))
        assert query.statement == f"UPDATE orders SET {field} = %(p2)s WHERE id = %(p1)s"
        assert sorted(placeholder_indices(query.statement)) == [1, 2]
        assert query.values == [7, value]

    def test_params_map_placeholders_to_values(self) -> None:
        query = compose_update(3, OrderPatch(size="S"))
        assert query.params() == {"p1": 3, "p2": "S"}


class TestAllFields:
    def test_fixed_field_order(self) -> None:
        patch = OrderPatch(total=450, size="M", coffee_name="Latte", name="A")
        query = compose_update(1, patch)
        assert query.statement == (
            "UPDATE orders SET name = %(p2)s, coffee_name = %(p3)s, "
            "size = %(p4)s, total = %(p5)s WHERE id = %(p1)s"
        )
        assert query.values == [1, "A", "Latte", "M", 450]

    def test_five_placeholders(self) -> None:
        query = compose_update(1, OrderPatch(name="A", coffee_name="Latte", size="M", total=450))
        assert sorted(placeholder_indices(query.statement)) == [1, 2, 3, 4, 5]


class TestSparsePatches:
    def test_gaps_are_numbered_contiguously(self) -> None:
        query = compose_update(9, OrderPatch(name="Bo", total=300))
        assert query.statement == "UPDATE orders SET name = %(p2)s, total = %(p3)s WHERE id = %(p1)s"
        assert query.values == [9, "Bo", 300]

    @pytest.mark.parametrize("mask", range(1, 16))
    def test_every_placeholder_binds_its_own_field(self, mask) -> None:
        sample = {"name": "n", "coffee_name": "c", "size": "s", "total": 42}
        chosen = {f: sample[f] for i, f in enumerate(ORDER_FIELDS) if mask & (1 << i)}
        query = compose_update(5, OrderPatch(**chosen))

        params = query.params()
        assert params["p1"] == 5
        for column, index in re.findall(r"(\w+) = %\(p(\d+)\)s", query.statement):
            expected = 5 if column == "id" else chosen[column]
            assert params[f"p{index}"] == expected
        assert len(query.values) == len(chosen) + 1

    def test_id_is_never_assigned(self) -> None:
        query = compose_update(2, OrderPatch(name="x"))
        set_clause = query.statement.split(" WHERE ")[0]
        assert re.findall(r"(\w+) = ", set_clause) == ["name"]


class TestInjectionSafety:
    def test_values_are_not_interpolated(self) -> None:
        hostile = "x'; DROP TABLE orders; --"
        query = compose_update(1, OrderPatch(name=hostile))
        assert hostile not in query.statement
        assert query.values[1] == hostile


class TestEmptyPatch:
    def test_empty_patch_is_rejected(self) -> None:
        with pytest.raises(EmptyPatchError):
            compose_update(1, OrderPatch())

    def test_empty_patch_error_is_value_error(self) -> None:
        assert issubclass(EmptyPatchError, ValueError)


class TestUpdateBuilder:
    def test_set_returns_builder(self) -> None:
        builder = UpdateBuilder("orders", 4)
        assert builder.set("name", "a") is builder

    def test_build_returns_copy_of_values(self) -> None:
        builder = UpdateBuilder("orders", 4).set("size", "M")
        first = builder.build()
        first.values.append("junk")
        assert builder.build().values == [4, "M"]

    def test_placeholder_format(self) -> None:
        assert placeholder(1) == "%(p1)s"
        assert placeholder(12) == "%(p12)s"

    def test_composed_update_is_a_tuple(self) -> None:
        statement, values = ComposedUpdate("UPDATE orders SET size = %(p2)s WHERE id = %(p1)s", [1, "M"])
        assert values == [1, "M"]
        assert statement.startswith("UPDATE orders")
