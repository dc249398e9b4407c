"""
AES-128-CTR with random access.

The counter block is an 8-byte nonce followed by the big-endian block number
of the data being processed. The block number is recomputed from the absolute
stream offset for every 16-byte chunk instead of being incremented, so any
offset can be read without replaying the stream before it.

Only the low 7 bytes of the block number are written. Byte 8 of the counter
keeps the value it got at construction, leaving a 56-bit block space.
"""
import logging
from threading import Lock

from cryptography.hazmat.primitives.ciphers import modes

from .aes_ecb import new_cipher
from .constants import BLOCK_SIZE, CTR_INDEX_SIZE, CTR_NONCE_SIZE, KEY_SIZE
from .errors import InvalidKeyLength, UnsupportedOffsetAlignment, check_length

logger = logging.getLogger(__name__)

_INDEX_MASK = (1 << (CTR_INDEX_SIZE * 8)) - 1


def _xor(data: bytes, keystream: bytes) -> bytes:
    size = len(data)
    return (int.from_bytes(data, 'big') ^ int.from_bytes(keystream, 'big')).to_bytes(size, 'big')


class CtrCursor:
    """
    Reusable CTR decryption context over one encrypted region.

    Reads and counter access are serialized by an internal lock; the counter
    block doubles as scratch space.

    With ``strict`` set, reads whose offset or length is not a multiple of 16
    raise :class:`UnsupportedOffsetAlignment`. Otherwise a partial trailing chunk
    uses a truncated keystream and an unaligned offset starts partway into the
    first block's keystream.
    """

    def __init__(self, key, nonce, offset: int = 0, strict: bool = False):
        check_length('key', key, KEY_SIZE, InvalidKeyLength)
        check_length('nonce', nonce, CTR_NONCE_SIZE)
        self.strict = strict
        self._lock = Lock()
        # ECB over the counter blocks gives the keystream; the context has no chaining
        self._keystream = new_cipher(key, modes.ECB()).encryptor()
        self._counter = bytearray(BLOCK_SIZE)
        self._counter[:CTR_NONCE_SIZE] = nonce
        self._counter[CTR_NONCE_SIZE:] = ((offset >> 4) & ((1 << 64) - 1)).to_bytes(BLOCK_SIZE - CTR_NONCE_SIZE, 'big')

    @property
    def counter(self) -> bytes:
        """Copy of the current counter block."""
        with self._lock:
            return bytes(self._counter)

    def _set_block(self, block: int):
        self._counter[-CTR_INDEX_SIZE:] = (block & _INDEX_MASK).to_bytes(CTR_INDEX_SIZE, 'big')

    def update_counter(self, offset: int):
        """Point the counter at the block containing ``offset``."""
        with self._lock:
            self._set_block(offset >> 4)

    def read(self, offset: int, buffer):
        """
        Decrypt ``buffer`` in place, treating it as the ciphertext found at ``offset``
        in the encrypted stream. Returns ``buffer``.

        There is no bounds checking against the stream length.
        """
        view = memoryview(buffer).cast('B')
        if view.readonly:
            raise TypeError('buffer must be writable, use decrypt() for immutable data')
        size = len(view)
        if self.strict and (offset % BLOCK_SIZE or size % BLOCK_SIZE):
            raise UnsupportedOffsetAlignment(
                f'offset 0x{offset:X} and size 0x{size:X} must both be multiples of 0x{BLOCK_SIZE:X}')
        if not size:
            return buffer

        skip = offset % BLOCK_SIZE
        first = offset >> 4
        blocks = (skip + size + BLOCK_SIZE - 1) // BLOCK_SIZE

        with self._lock:
            counters = bytearray()
            for i in range(blocks):
                self._set_block(first + i)
                counters += self._counter
            keystream = self._keystream.update(bytes(counters))

        logger.debug('CTR read at 0x%X, 0x%X bytes, %d blocks', offset, size, blocks)
        view[:] = _xor(view.tobytes(), keystream[skip:skip + size])
        return buffer

    def decrypt(self, offset: int, data) -> bytes:
        """Decrypt a copy of ``data`` at ``offset``. CTR is symmetric, so this also encrypts."""
        return bytes(self.read(offset, bytearray(data)))

    encrypt = decrypt


class CtrStorage:
    """
    Decrypting view over an encrypted source.

    ``source`` is any object with ``read(offset, size)`` returning bytes and a
    ``size`` attribute, such as a section of an archive already loaded in memory.
    """

    def __init__(self, key, source, nonce=bytes(CTR_NONCE_SIZE)):
        self.source = source
        self._cursor = CtrCursor(key, nonce)

    @property
    def size(self) -> int:
        return self.source.size

    def read(self, offset: int, size: int) -> bytes:
        data = bytearray(self.source.read(offset, size))
        return bytes(self._cursor.read(offset, data))
