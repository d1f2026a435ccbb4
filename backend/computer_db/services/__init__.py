"""Services Layer — orchestration around the pure core.

Invariants:
    - Services validate with core/ checks, then call repositories
    - Each public service call is one unit of work
    - Services hold no state beyond their injected session and repositories
"""
