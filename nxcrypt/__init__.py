"""Decryption routines for the console's content archives (NCA) and game card images (XCI)."""
import logging

from .aes_cbc import cbc_decrypt, cbc_encrypt, decrypt_xci_header
from .aes_ctr import CtrCursor, CtrStorage
from .aes_ecb import decrypt_block, decrypt_nca_key_area, encrypt_block
from .aes_xts import XtsCipher, decrypt_nca_header, encrypt_nca_header
from .errors import (FormatMismatch, InvalidBufferLength, InvalidKeyLength, InvalidSectorIndex, NxCryptError,
                     UnsupportedOffsetAlignment)
from .tweak import nintendo_tweak

__all__ = ['cbc_decrypt', 'cbc_encrypt', 'decrypt_xci_header', 'CtrCursor', 'CtrStorage', 'decrypt_block',
           'decrypt_nca_key_area', 'encrypt_block', 'XtsCipher', 'decrypt_nca_header', 'encrypt_nca_header',
           'FormatMismatch', 'InvalidBufferLength', 'InvalidKeyLength', 'InvalidSectorIndex', 'NxCryptError',
           'UnsupportedOffsetAlignment', 'nintendo_tweak']

__version__ = '0.1.0'

logging.getLogger(__name__).addHandler(logging.NullHandler())
