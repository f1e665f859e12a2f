import logging
from construct import *
from flacmeta import base
from flacmeta.blocks import BlockType, SeekPoint, SeekTable
from flacmeta.errors import MalformedSeekTableError

logger = logging.getLogger(__name__)

SeekPointFormat = Struct(
    'sample_number' / Int64ub,
    'frame_offset' / Int64ub,
    'sample_count' / Int16ub,
)

SEEKPOINT_SIZE = SeekPointFormat.sizeof()


class Decoder(base.BlockDecoder):
    block_type = BlockType.SEEKTABLE
    error = MalformedSeekTableError

    def load(self, header, cursor):
        if cursor.remaining() % SEEKPOINT_SIZE:
            raise MalformedSeekTableError(
                f'SEEKTABLE body of {cursor.remaining()} bytes is not a multiple of {SEEKPOINT_SIZE}')

        points = []
        last = None
        while cursor.remaining():
            item = cursor.parse(SeekPointFormat)
            point = SeekPoint(item.sample_number, item.frame_offset, item.sample_count)
            if not point.is_placeholder:
                if last is not None and point.sample_number <= last:
                    logger.warning('seek point %d is not after %d', point.sample_number, last)
                last = point.sample_number
            points.append(point)

        return SeekTable(header, tuple(points))
