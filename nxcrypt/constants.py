BLOCK_SIZE = 16  # AES block size in bytes
KEY_SIZE = 0x10
XTS_KEY_SIZE = 0x20  # data key followed by tweak key

SECTOR_SIZE = 0x200

NCA_HEADER_SIZE = 0xC00
NCA_MAGIC = b"NCA3"
NCA_MAGIC_OFFSET = 0x200
# (start, end, first sector) of the two header regions
NCA_HEADER_REGIONS = ((0x000, 0x400, 0), (0x400, 0xC00, 2))

KEY_AREA_ENTRY_SIZE = 0x10

XCI_HEADER_SIZE = 0x70
IV_SIZE = 0x10

CTR_NONCE_SIZE = 8
CTR_INDEX_SIZE = 7  # counter bytes rewritten per block; byte 8 is left alone
