"""Allow ``python -m marina_ledger`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m marina_ledger`` behaves identically to the ``marina-ledger``
console script.
"""

from __future__ import annotations

from marina_ledger.cli.app import cli

if __name__ == "__main__":
    cli()
