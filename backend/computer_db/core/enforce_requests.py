"""Request Enforcement — pure precondition checks for listing and mutations.

Invariants:
    - Every check is PURE: returns a Violation, or None when the value is acceptable
    - Checks never raise and never touch the store; the service shell raises
      InvalidArgumentError(violation) and performs existence lookups itself
    - page == total_pages is accepted (empty final page); page > total_pages is not
    - introduced <= discontinued is NOT checked
    - Ids and page sizes above MAX_ID never reach the store: lookups treat
      them as absent, every other check rejects them

Design Decisions:
    - Violation | None as return type: the failure is part of the signature,
      the same shape as enforce_round.validate_* returning an error or None
"""

from computer_db.core.errors import Violation
from computer_db.core.paging import QueryRequest
from computer_db.core.records import Company, Computer

# Largest value of the 32-bit INTEGER id columns
MAX_ID = 2**31 - 1


# ─── Listing ─────────────────────────────────────────────────────

def check_query_request(request: QueryRequest | None) -> Violation | None:
    """Rules checked before the store is consulted."""
    if request is None:
        return Violation("request", "Pagination object is null")
    if request.page_size <= 0:
        return Violation("page_size", "Page size must be > 0")
    if request.page_size > MAX_ID:
        return Violation("page_size", f"Page size must be <= {MAX_ID}")
    if request.company_id is not None:
        return check_id(request.company_id, "company_id")
    return None


def check_page_in_range(page: int, total_pages: int) -> Violation | None:
    """Rules checked once the total page count is known."""
    if page < 0 or page > total_pages:
        return Violation("page", f"Page number must be [0-{total_pages}]")
    return None


def normalize_filter(filter_text: str | None) -> str | None:
    """Blank filters mean "no filter"."""
    if filter_text is None:
        return None
    stripped = filter_text.strip()
    return stripped or None


# ─── Identity ────────────────────────────────────────────────────

def check_positive_id(entity_id: int | None, field: str = "id") -> Violation | None:
    if entity_id is None or entity_id <= 0:
        return Violation(field, "ID must be > 0")
    return None


def fits_id_column(entity_id: int) -> bool:
    """Whether the id can be bound to the INTEGER id columns at all."""
    return entity_id <= MAX_ID


def check_id(entity_id: int | None, field: str = "id") -> Violation | None:
    """Positive and within the id column range."""
    violation = check_positive_id(entity_id, field)
    if violation is None and not fits_id_column(entity_id):
        return Violation(field, f"ID must be <= {MAX_ID}")
    return violation


def check_ids(ids: list[int]) -> Violation | None:
    for entity_id in ids:
        violation = check_id(entity_id, "ids")
        if violation:
            return violation
    return None


# ─── Computer ────────────────────────────────────────────────────

def _check_computer_fields(computer: Computer) -> Violation | None:
    if not computer.name or not computer.name.strip():
        return Violation("name", "Computer name is required")
    if computer.company_id is not None:
        return check_id(computer.company_id, "company_id")
    return None


def check_computer_for_insert(computer: Computer | None) -> Violation | None:
    if computer is None:
        return Violation("computer", "Computer object is null")
    if computer.id is not None:
        return Violation("id", "Computer should not have an id")
    return _check_computer_fields(computer)


def check_computer_for_update(computer: Computer | None) -> Violation | None:
    if computer is None:
        return Violation("computer", "Computer object is null")
    if computer.id is None:
        return Violation("id", "Computer should have an id and exist in the db")
    return check_id(computer.id) or _check_computer_fields(computer)


def check_computer_for_delete(computer: Computer | None) -> Violation | None:
    if computer is None:
        return Violation("computer", "Computer object is null")
    if computer.id is None:
        return Violation("id", "Computer should have an id and exist in the db")
    return check_id(computer.id)


def missing_computer(computer_id: int) -> Violation:
    return Violation("id", f"Computer {computer_id} does not exist")


def missing_company_reference(company_id: int) -> Violation:
    return Violation("company_id", f"Company {company_id} does not exist")


# ─── Company ─────────────────────────────────────────────────────

def check_company_for_delete(company: Company | None) -> Violation | None:
    if company is None:
        return Violation("company", "Company object is null")
    return check_id(company.id)


def missing_company(company_id: int) -> Violation:
    return Violation("id", f"Company {company_id} does not exist")
