from flacmeta import base
from flacmeta.blocks import BlockType, Padding


class Decoder(base.BlockDecoder):
    block_type = BlockType.PADDING

    def load(self, header, cursor):
        # Padding content is never interpreted.
        length = cursor.remaining()
        cursor.skip(length)
        return Padding(header, length)
