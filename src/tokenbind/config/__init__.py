"""Bind config loading and validation."""

from .models import BindConfig, decode_bytecode
from .schemas import SchemaRegistry, SchemaValidationError

__all__ = ["BindConfig", "SchemaRegistry", "SchemaValidationError", "decode_bytecode"]
