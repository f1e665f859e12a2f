import logging
from flacmeta import base
from flacmeta.blocks import BlockType, VorbisComment
from flacmeta.errors import OutOfBoundsError

logger = logging.getLogger(__name__)


def read_string(cursor):
    # Vorbis comment lengths are little-endian, unlike the rest of FLAC.
    length = cursor.read_u32le()
    return cursor.read_exact(length).decode('utf-8', 'replace')


class Decoder(base.BlockDecoder):
    block_type = BlockType.VORBIS_COMMENT

    def load(self, header, cursor):
        vendor = read_string(cursor)
        count = cursor.read_u32le()

        # Every entry carries at least its 4-byte length.
        if count * 4 > cursor.remaining():
            raise OutOfBoundsError(
                f'{count} comments cannot fit in the remaining {cursor.remaining()} bytes')

        comments = []
        for i in range(count):
            comment = read_string(cursor)
            if '=' not in comment:
                logger.warning('comment %d has no "=", keeping %r as a key with no value', i, comment)
            comments.append(comment)

        return VorbisComment(header, vendor, tuple(comments))
