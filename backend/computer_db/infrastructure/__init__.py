"""Infrastructure Layer — database sessions and cross-cutting concerns.

Invariants:
    - Infrastructure never imports core/ domain logic, only core/errors
    - Every store failure leaves infrastructure as an AccessError
"""
