"""Member API — latest-version member record lookup over HTTP.

Invariants:
    - Package root contains no executable code beyond the version string
"""

__version__ = "1.0.0"
