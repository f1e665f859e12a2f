from construct import *


MAGIC = b'fLaC'
HEADER_SIZE = 4

# Type code 127 is forbidden so a block header can't be confused with a frame sync code.
INVALID_BLOCK_TYPE = 127

BlockHeaderFormat = Struct(
    'info' / BitStruct(
        'last' / Flag,
        'block_type' / BitsInteger(7),
    ),
    'size' / Int24ub,
)

MagicFormat = Const(MAGIC)
