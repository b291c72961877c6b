__version__ = "1.0.0"

__all__ = [
    "__version__",
    # Config
    "BindConfig",
    # Network
    "ChainContext",
    "resolve_network",
    # Errors
    "BindToolError",
    "ChainError",
    "ConfigError",
    "InsufficientFundsError",
    "KeystoreError",
    "LedgerError",
    "TransactionFailedError",
]

from .chain.network import ChainContext, resolve_network
from .config.models import BindConfig
from .errors import (
    BindToolError,
    ChainError,
    ConfigError,
    InsufficientFundsError,
    KeystoreError,
    LedgerError,
    TransactionFailedError,
)
