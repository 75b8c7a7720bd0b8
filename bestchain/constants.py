from eth_typing import (
    Hash32,
)

HASH_SIZE = 32

#
# Header records (input)
#
HEADER_SIZE = 80

PARENT_HASH_OFFSET = 4
PARENT_HASH_END = PARENT_HASH_OFFSET + HASH_SIZE

# the 32-bit work proxy ("bits") of a header record
WORK_OFFSET = 72
WORK_END = WORK_OFFSET + 4
WORK_FORMAT = "<I"
UINT_32_MAX = 2**32 - 1

#
# Height records (output)
#
HEIGHT_FORMAT = "<i"
HEIGHT_RECORD_SIZE = HASH_SIZE + 4
INT_32_MAX = 2**31 - 1

GENESIS_HEIGHT = 0

ZERO_HASH32 = Hash32(HASH_SIZE * b"\x00")
