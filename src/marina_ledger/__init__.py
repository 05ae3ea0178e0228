"""marina-ledger — inventory and billing for marina boat storage.

Tracks boats, where each one is kept, and what its owner owes, persisted
to a flat comma-delimited file between runs.
"""

from marina_ledger.version import __version__

__all__: list[str] = ["__version__"]
