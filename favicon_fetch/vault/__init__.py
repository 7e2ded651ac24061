"""
Vault backends for persisting favicons.

Provides the abstract Vault interface together with an in-memory backend and
a file-based backend.
"""

from .base import Vault
from .file import FileVault
from .memory import MemoryVault, VaultEntry

__all__ = [
    "Vault",
    "FileVault",
    "MemoryVault",
    "VaultEntry",
]
