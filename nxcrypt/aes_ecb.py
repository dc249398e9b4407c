# AES-128-ECB
import logging

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from cryptography.hazmat.backends import default_backend

from .constants import BLOCK_SIZE, KEY_AREA_ENTRY_SIZE, KEY_SIZE
from .errors import InvalidKeyLength, check_length

logger = logging.getLogger(__name__)


def new_cipher(key, mode) -> Cipher:
    """AES-128 cipher for ``mode``; every other module builds on this."""
    check_length('key', key, KEY_SIZE, InvalidKeyLength)
    return Cipher(algorithms.AES(bytes(key)), mode, backend=default_backend())


def aes_encrypt(key, plaintext) -> bytes:
    encryptor = new_cipher(key, modes.ECB()).encryptor()
    return encryptor.update(plaintext) + encryptor.finalize()


def aes_decrypt(key, ciphertext) -> bytes:
    decryptor = new_cipher(key, modes.ECB()).decryptor()
    return decryptor.update(ciphertext) + decryptor.finalize()


def decrypt_block(key, block) -> bytes:
    """Decrypt exactly one 16-byte block. No chaining, no padding removal."""
    check_length('block', block, BLOCK_SIZE)
    return aes_decrypt(key, bytes(block))


def encrypt_block(key, block) -> bytes:
    check_length('block', block, BLOCK_SIZE)
    return aes_encrypt(key, bytes(block))


def decrypt_nca_key_area(key, entries) -> list:
    """
    Decrypt the entries of an archive's key area.

    Every entry is a separate 16-byte key encrypted on its own, so each one is
    decrypted independently. All entries are checked before any is decrypted.
    """
    check_length('key', key, KEY_SIZE, InvalidKeyLength)
    entries = list(entries)
    for entry in entries:
        check_length('entry', entry, KEY_AREA_ENTRY_SIZE)

    logger.debug('Decrypting %d key area entries', len(entries))
    decryptor = new_cipher(key, modes.ECB()).decryptor()
    plain = [decryptor.update(bytes(entry)) for entry in entries]
    decryptor.finalize()
    return plain
