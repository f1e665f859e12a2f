from flacmeta import base
from flacmeta.blocks import BlockType, Picture
from flacmeta.errors import TruncatedPictureError


def read_prefixed(cursor):
    length = cursor.read_u32be()
    if length > cursor.remaining():
        raise TruncatedPictureError(
            f'field declares {length} bytes, {cursor.remaining()} left in PICTURE body')
    return cursor.read_exact(length)


class Decoder(base.BlockDecoder):
    block_type = BlockType.PICTURE
    error = TruncatedPictureError

    def load(self, header, cursor):
        picture_type = cursor.read_u32be()
        mime = read_prefixed(cursor).decode('ascii', 'replace')
        description = read_prefixed(cursor).decode('utf-8', 'replace')
        width = cursor.read_u32be()
        height = cursor.read_u32be()
        depth = cursor.read_u32be()
        colors = cursor.read_u32be()
        data = read_prefixed(cursor)
        return Picture(header, picture_type, mime, description, width, height, depth, colors, data)
