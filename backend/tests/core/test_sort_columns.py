"""Sort Column Registry — tests for the closed sort column mapping.

Tests cover:
    - Every SortColumn has exactly one OrderSpec
    - Non-NAME columns break ties on computer.name
    - Lookup by enum or by case-insensitive name
    - Unknown identifiers are rejected, never replaced
    - The registry cannot be mutated
"""

import pytest

from computer_db.core.domain_types import SortColumn, SortDirection
from computer_db.core.errors import InvalidArgumentError
from computer_db.core.sort_columns import (
    SORT_REGISTRY, lookup_order, parse_sort_column, parse_sort_direction,
)


def test_registry_covers_every_column():
    assert set(SORT_REGISTRY) == set(SortColumn)
    for column, spec in SORT_REGISTRY.items():
        assert spec.column is column


def test_name_orders_by_name_only():
    assert lookup_order(SortColumn.NAME).keys == ("computer.name",)


@pytest.mark.parametrize("column, primary", [
    (SortColumn.INTRODUCED, "computer.introduced"),
    (SortColumn.DISCONTINUED, "computer.discontinued"),
    (SortColumn.COMPANY_NAME, "company.name"),
    (SortColumn.COMPANY_ID, "company.id"),
])
def test_other_columns_break_ties_on_name(column, primary):
    assert lookup_order(column).keys == (primary, "computer.name")


@pytest.mark.parametrize("identifier", ["company_name", "COMPANY_NAME", " Company_Name "])
def test_lookup_accepts_case_insensitive_names(identifier):
    assert lookup_order(identifier).column is SortColumn.COMPANY_NAME


@pytest.mark.parametrize("identifier", ["price", "", "name;drop table computer"])
def test_lookup_rejects_unknown_identifiers(identifier):
    with pytest.raises(InvalidArgumentError) as exc:
        lookup_order(identifier)
    assert exc.value.field == "sort"


def test_parse_sort_column_passes_enum_through():
    assert parse_sort_column(SortColumn.DISCONTINUED) is SortColumn.DISCONTINUED


def test_parse_sort_direction():
    assert parse_sort_direction("DESC") is SortDirection.DESC
    assert parse_sort_direction(SortDirection.ASC) is SortDirection.ASC


def test_parse_sort_direction_rejects_unknown():
    with pytest.raises(InvalidArgumentError) as exc:
        parse_sort_direction("sideways")
    assert exc.value.field == "order"


def test_registry_is_read_only():
    with pytest.raises(TypeError):
        SORT_REGISTRY[SortColumn.NAME] = None
