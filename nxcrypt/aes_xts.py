"""
AES-128-XTS for archive headers.

Key splitting: the 32-byte key is two 16-byte AES-128 keys, data key first and
tweak key second.
Tweak: derived per 0x200-byte sector from the sector number, big-endian
(see :mod:`nxcrypt.tweak`).

The header is decrypted in two areas. The first 0x400 bytes are sectors 0 and 1.
The remaining 0x800 bytes start again at sector 2. Only NCA3 headers number their
sectors like this, which is why the magic is checked between the two areas.
"""
import logging

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from cryptography.hazmat.backends import default_backend

from .constants import (NCA_HEADER_REGIONS, NCA_HEADER_SIZE, NCA_MAGIC, NCA_MAGIC_OFFSET, SECTOR_SIZE,
                        XTS_KEY_SIZE)
from .errors import FormatMismatch, InvalidBufferLength, InvalidKeyLength, check_length
from .tweak import nintendo_tweak

logger = logging.getLogger(__name__)


class XtsCipher:
    def __init__(self, key):
        """
        Initialize XTS cipher.
        For AES-128-XTS the key is 32 bytes (2x128-bit keys).
        """
        check_length('key', key, XTS_KEY_SIZE, InvalidKeyLength)
        self.key = bytes(key)

    def _sector_cipher(self, sector: int) -> Cipher:
        return Cipher(algorithms.AES(self.key), modes.XTS(nintendo_tweak(sector)), backend=default_backend())

    def _sectors(self, data, sector: int, sector_size: int):
        if sector_size <= 0 or sector_size % 16 != 0:
            raise InvalidBufferLength(f'sector size must be a positive multiple of 0x10, got 0x{sector_size:X}')
        if not data or len(data) % sector_size != 0:
            raise InvalidBufferLength(f'data must be a multiple of 0x{sector_size:X} bytes, got 0x{len(data):X}')
        data = bytes(data)
        for offset in range(0, len(data), sector_size):
            yield sector + offset // sector_size, data[offset:offset + sector_size]

    def decrypt_area(self, data, sector: int, sector_size: int = SECTOR_SIZE) -> bytes:
        """
        Decrypt consecutive sectors.

        Args:
            data: Ciphertext, a whole number of sectors
            sector: Sector number of the first sector in ``data``
            sector_size: Size of each sector for tweak generation
        """
        out = bytearray()
        for number, sector_data in self._sectors(data, sector, sector_size):
            decryptor = self._sector_cipher(number).decryptor()
            out += decryptor.update(sector_data) + decryptor.finalize()
        return bytes(out)

    def encrypt_area(self, data, sector: int, sector_size: int = SECTOR_SIZE) -> bytes:
        out = bytearray()
        for number, sector_data in self._sectors(data, sector, sector_size):
            encryptor = self._sector_cipher(number).encryptor()
            out += encryptor.update(sector_data) + encryptor.finalize()
        return bytes(out)


def decrypt_nca_header(key, header) -> bytes:
    """
    Decrypt an archive header.

    ``header`` may be longer than 0xC00 bytes, in which case only the first 0xC00
    bytes are used. Raises :class:`FormatMismatch` without decrypting the second
    area if the magic is wrong.
    """
    check_length('key', key, XTS_KEY_SIZE, InvalidKeyLength)
    if len(header) < NCA_HEADER_SIZE:
        raise InvalidBufferLength(f"'header' must be at least 0x{NCA_HEADER_SIZE:X} bytes long, "
                                  f"got 0x{len(header):X}")
    xts = XtsCipher(key)
    header = bytes(header[:NCA_HEADER_SIZE])

    (start, end, sector), second = NCA_HEADER_REGIONS
    out = bytearray(header)
    out[start:end] = xts.decrypt_area(header[start:end], sector)

    magic = bytes(out[NCA_MAGIC_OFFSET:NCA_MAGIC_OFFSET + len(NCA_MAGIC)])
    if magic != NCA_MAGIC:
        logger.warning('Header magic mismatch: %r', magic)
        raise FormatMismatch(NCA_MAGIC, magic)

    start, end, sector = second
    out[start:end] = xts.decrypt_area(header[start:end], sector)
    logger.debug('Decrypted %s header', NCA_MAGIC.decode())
    return bytes(out)


def encrypt_nca_header(key, header) -> bytes:
    """Encrypt a plaintext 0xC00-byte archive header with the same sector layout."""
    check_length('key', key, XTS_KEY_SIZE, InvalidKeyLength)
    check_length('header', header, NCA_HEADER_SIZE)
    xts = XtsCipher(key)
    header = bytes(header)

    out = bytearray(header)
    for start, end, sector in NCA_HEADER_REGIONS:
        out[start:end] = xts.encrypt_area(header[start:end], sector)
    return bytes(out)
