"""Infrastructure layer — filesystem integration.

Every raw ``OSError`` must be caught here and re-raised as a
:class:`~marina_ledger.exceptions.MarinaLedgerError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from marina_ledger.infra.flat_file import FlatFile

__all__: list[str] = ["FlatFile"]
