import logging
from construct import *
from flacmeta import base
from flacmeta.blocks import BlockType, StreamInfo
from flacmeta.errors import MalformedStreamInfoError

logger = logging.getLogger(__name__)

StreamInfoFormat = Struct(
    'min_block_size' / Int16ub,
    'max_block_size' / Int16ub,
    'min_frame_size' / Int24ub,
    'max_frame_size' / Int24ub,
    # Channels and bits per sample are stored minus one.
    'packed' / BitStruct(
        'sample_rate' / BitsInteger(20),
        'channels' / BitsInteger(3),
        'bits_per_sample' / BitsInteger(5),
        'total_samples' / BitsInteger(36),
    ),
    'md5' / Bytes(16),
)

STREAMINFO_SIZE = StreamInfoFormat.sizeof()


class Decoder(base.BlockDecoder):
    block_type = BlockType.STREAMINFO
    error = MalformedStreamInfoError

    def load(self, header, cursor):
        if cursor.remaining() != STREAMINFO_SIZE:
            raise MalformedStreamInfoError(
                f'STREAMINFO body is {cursor.remaining()} bytes, expected {STREAMINFO_SIZE}')

        info = cursor.parse(StreamInfoFormat)
        packed = info.packed

        if not packed.sample_rate:
            logger.warning('STREAMINFO sample rate is 0 (unknown)')

        return StreamInfo(header, info.min_block_size, info.max_block_size, info.min_frame_size,
                          info.max_frame_size, packed.sample_rate, packed.channels + 1,
                          packed.bits_per_sample + 1, packed.total_samples, info.md5)
