class NxCryptError(Exception):
    """Base exception for all decryption errors."""


class InvalidKeyLength(NxCryptError, ValueError):
    """Key material is not the size the operation requires."""


class InvalidBufferLength(NxCryptError, ValueError):
    """Input buffer is not the size the operation requires."""


class InvalidSectorIndex(NxCryptError, ValueError):
    """Sector index does not fit in an unsigned 128-bit integer."""


class UnsupportedOffsetAlignment(NxCryptError, ValueError):
    """A strict CTR read was not aligned to the 16-byte block size."""


class FormatMismatch(NxCryptError):
    """
    Decrypted header magic is wrong. Either the key is wrong or the header is an
    older format version that numbers its sectors differently.
    """
    def __init__(self, expected: bytes, found: bytes):
        super().__init__(expected, found)
        self.expected = expected
        self.found = found

    def __str__(self):
        return f'expected magic {self.expected!r}, found {self.found!r}'


def check_length(name: str, data, expected: int, error=InvalidBufferLength):
    if len(data) != expected:
        raise error(f"'{name}' must be 0x{expected:X} bytes long, got 0x{len(data):X}")
