"""Sort Column Registry — closed mapping from sort column to ordering keys.

Invariants:
    - Exactly one OrderSpec per SortColumn, built at import, read-only afterwards
    - Every non-NAME column breaks ties on computer.name
    - Unknown identifiers fail with InvalidArgumentError — never silently defaulted
    - Keys are logical field paths ("table.column"); the store maps them to SQL

Design Decisions:
    - MappingProxyType over a plain dict: the registry cannot be mutated at runtime
    - Defaulting a missing sort belongs to the input layer, not to lookup_order()
"""

from dataclasses import dataclass
from types import MappingProxyType

from computer_db.core.domain_types import SortColumn, SortDirection
from computer_db.core.errors import InvalidArgumentError, Violation


@dataclass(frozen=True)
class OrderSpec:
    """Ordering keys, most significant first."""
    column: SortColumn
    keys: tuple[str, ...]


_TIE_BREAK = "computer.name"

SORT_REGISTRY: MappingProxyType = MappingProxyType({
    SortColumn.NAME: OrderSpec(SortColumn.NAME, ("computer.name",)),
    SortColumn.INTRODUCED: OrderSpec(
        SortColumn.INTRODUCED, ("computer.introduced", _TIE_BREAK),
    ),
    SortColumn.DISCONTINUED: OrderSpec(
        SortColumn.DISCONTINUED, ("computer.discontinued", _TIE_BREAK),
    ),
    SortColumn.COMPANY_NAME: OrderSpec(
        SortColumn.COMPANY_NAME, ("company.name", _TIE_BREAK),
    ),
    SortColumn.COMPANY_ID: OrderSpec(
        SortColumn.COMPANY_ID, ("company.id", _TIE_BREAK),
    ),
})


def parse_sort_column(identifier: SortColumn | str) -> SortColumn:
    """Resolve "company_name", "COMPANY_NAME" or SortColumn.COMPANY_NAME."""
    if isinstance(identifier, SortColumn):
        return identifier
    try:
        return SortColumn(str(identifier).strip().lower())
    except ValueError:
        supported = ", ".join(c.value for c in SortColumn)
        raise InvalidArgumentError(Violation(
            "sort", f"Unknown sort column '{identifier}'. Supported: {supported}",
        )) from None


def parse_sort_direction(identifier: SortDirection | str) -> SortDirection:
    if isinstance(identifier, SortDirection):
        return identifier
    try:
        return SortDirection(str(identifier).strip().lower())
    except ValueError:
        raise InvalidArgumentError(Violation(
            "order", f"Unknown sort direction '{identifier}'. Supported: asc, desc",
        )) from None


def lookup_order(identifier: SortColumn | str) -> OrderSpec:
    """Return the OrderSpec registered for a sort column."""
    return SORT_REGISTRY[parse_sort_column(identifier)]
