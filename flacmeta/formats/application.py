from flacmeta import base
from flacmeta.blocks import Application, BlockType


class Decoder(base.BlockDecoder):
    block_type = BlockType.APPLICATION

    def load(self, header, cursor):
        app_id = cursor.read_u32be()
        return Application(header, app_id, cursor.read_exact(cursor.remaining()))
