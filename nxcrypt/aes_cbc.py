# AES-128-CBC
import logging

from cryptography.hazmat.primitives.ciphers import modes

from .aes_ecb import new_cipher
from .constants import BLOCK_SIZE, IV_SIZE, XCI_HEADER_SIZE
from .errors import InvalidBufferLength, check_length

logger = logging.getLogger(__name__)


def _check_region(key, iv, data):
    check_length('iv', iv, IV_SIZE)
    if len(data) % BLOCK_SIZE != 0:
        raise InvalidBufferLength(f'data must be a multiple of 0x{BLOCK_SIZE:X} bytes, got 0x{len(data):X}')
    return new_cipher(key, modes.CBC(bytes(iv)))


def cbc_decrypt(key, iv, data) -> bytes:
    """Decrypt whole blocks with CBC. Regions here are fixed size, so nothing is unpadded."""
    decryptor = _check_region(key, iv, data).decryptor()
    return decryptor.update(bytes(data)) + decryptor.finalize()


def cbc_encrypt(key, iv, data) -> bytes:
    encryptor = _check_region(key, iv, data).encryptor()
    return encryptor.update(bytes(data)) + encryptor.finalize()


def decrypt_xci_header(key, iv, contents) -> bytes:
    """Decrypt the 0x70-byte encrypted region of a game card header."""
    check_length('contents', contents, XCI_HEADER_SIZE)
    logger.debug('Decrypting game card header region (0x%X bytes)', len(contents))
    return cbc_decrypt(key, iv, contents)
