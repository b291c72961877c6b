"""Error taxonomy for token-bind-tool.

Operations raise; only the CLI catches, prints the message and exits.
Every failure maps to the same generic exit status.
"""

from __future__ import annotations

from typing import Optional


class BindToolError(RuntimeError):
    exit_code: int = 1


class ConfigError(BindToolError):
    """Bad flags or a malformed bind config."""


class KeystoreError(BindToolError):
    """Keystore directory access, creation or unlock failure."""


class LedgerError(BindToolError):
    """Hardware wallet communication failure."""


class ChainError(BindToolError):
    """JSON-RPC failure or unexpected node response."""


class TransactionFailedError(ChainError):
    def __init__(self, message: str, tx_hash: Optional[str] = None) -> None:
        super().__init__(message)
        self.tx_hash = tx_hash


class InsufficientFundsError(ChainError):
    pass
