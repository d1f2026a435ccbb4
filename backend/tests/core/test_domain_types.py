"""Domain Types — verifies rich type definitions and enum values.

Tests:
    - NewType wrappers exist and are callable
    - SortColumn has exactly five members with query-string values
    - SortDirection is ASC | DESC
"""

from computer_db.core.domain_types import (
    CompanyId, ComputerId, SortColumn, SortDirection,
)


def test_identity_types_wrap_int():
    assert ComputerId(7) == 7
    assert CompanyId(3) == 3


def test_sort_column_has_exactly_five_members():
    assert [c.value for c in SortColumn] == [
        "name", "introduced", "discontinued", "company_name", "company_id",
    ]


def test_sort_direction_values():
    assert {d.value for d in SortDirection} == {"asc", "desc"}


def test_enums_compare_equal_to_strings():
    assert SortColumn.NAME == "name"
    assert SortDirection.DESC == "desc"
