"""Infrastructure Layer — database access and cross-cutting concerns.

Invariants:
    - Infrastructure implements core protocols; core never imports from here
    - All storage calls wrapped with error mapping to StorageError
"""
