import logging
from collections import namedtuple
from .blocks import MetaBlockHeader, SkippedBlock
from .errors import MalformedHeaderError
from .formats import application, cuesheet, flac, padding, picture, seektable, streaminfo, vorbis

logger = logging.getLogger(__name__)


DispatchResult = namedtuple('DispatchResult', 'consumed is_final block')


class BlockDispatcher:
    def __init__(self):
        self.decoders = {}
        for module in [streaminfo, padding, application, seektable, vorbis, cuesheet, picture]:
            decoder = module.Decoder()
            self.decoders[decoder.block_type] = decoder

    def read_header(self, cursor):
        info = cursor.parse(flac.BlockHeaderFormat)
        if info.info.block_type == flac.INVALID_BLOCK_TYPE:
            raise MalformedHeaderError(f'forbidden block type {flac.INVALID_BLOCK_TYPE}')
        return MetaBlockHeader(info.info.last, info.info.block_type, info.size)

    def dispatch(self, cursor):
        """Decode the block whose header starts at the cursor position.

        The cursor is advanced past the whole block. Unknown type codes are
        skipped without interpreting their body.
        """
        header = self.read_header(cursor)
        if header.size > cursor.remaining():
            raise MalformedHeaderError(
                f'{header.name} declares {header.size} bytes, only {cursor.remaining()} remain')
        body = cursor.view(header.size)

        logger.debug('%s block, %d bytes%s', header.name, header.size,
                     ' (last)' if header.is_final else '')

        decoder = self.decoders.get(header.block_type)
        if decoder is None:
            logger.warning('skipping %s block of %d bytes', header.name, header.size)
            block = SkippedBlock(header)
        else:
            block = decoder.decode(header, body)

        return DispatchResult(flac.HEADER_SIZE + header.size, header.is_final, block)
