"""Computer Database — inventory of computers and the companies that make them.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
