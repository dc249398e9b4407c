"""
Tweak derivation for the console's XTS sectors.

The common XTS convention (IEEE 1619, disk encryption) stores the sector number
little-endian in the tweak. The console stores it big-endian instead, so the
sector number lands in the last bytes of the 16-byte tweak:

    sector 1 -> 00000000000000000000000000000001
"""
from .errors import InvalidSectorIndex

TWEAK_SIZE = 16


def nintendo_tweak(sector_index: int) -> bytes:
    """Generate tweak from sector number (16 bytes, big-endian)."""
    try:
        return sector_index.to_bytes(TWEAK_SIZE, byteorder='big')
    except OverflowError as e:
        raise InvalidSectorIndex(f'sector index must fit in 128 unsigned bits, got {sector_index}') from e
