"""Derivation of unique storage keys for client uploads."""

import secrets

from .models import RANDOM_ID_LENGTH, StorageKey


def derive_storage_key(filename: str) -> StorageKey:
    """
    Builds a collision-resistant key for a client-supplied filename.

    The random part is 16 bytes from the OS CSPRNG, hex-encoded to 32
    characters.
    """
    return StorageKey(random_id=secrets.token_hex(RANDOM_ID_LENGTH // 2), filename=filename)
