import logging
from collections import namedtuple
from enum import Enum
from pathlib import Path
from construct import ConstructError
from .blocks import (Application, Cuesheet, FlacMetadata, Padding, Picture, SeekTable,
                     SkippedBlock, StreamInfo, VorbisComment)
from .cursor import ByteCursor
from .dispatch import BlockDispatcher
from .errors import DecodeError, FlacIOError, MalformedStreamInfoError, NotFlacError
from .formats import flac

logger = logging.getLogger(__name__)


class State(Enum):
    EXPECT_MAGIC = 1
    EXPECT_BLOCK = 2
    DONE = 3
    FAILED = 4


def read_file(path):
    # Only the metadata is decoded, but the whole file is read up front.
    try:
        with Path(path).open('rb') as f:
            return f.read()
    except OSError as e:
        raise FlacIOError(f'could not read {path}: {e}') from e


class DecodeResult(namedtuple('DecodeResult', 'metadata error')):
    """Outcome of a decode: either metadata, or the error that stopped it.

    In partial mode a failed result may carry both.
    """
    __slots__ = ()

    @property
    def ok(self):
        return self.error is None

    def unwrap(self):
        if self.error is not None:
            raise self.error
        return self.metadata


class MetadataReader:
    @staticmethod
    def from_bytes(data):
        return MetadataReader().read(data)

    @staticmethod
    def from_path(path):
        return MetadataReader.from_bytes(read_file(path))

    def __init__(self, dispatcher=None):
        self.dispatcher = dispatcher or BlockDispatcher()
        self.state = State.EXPECT_MAGIC
        self.error = None
        self._reset()

    def _reset(self):
        self._stream_info = None
        self._slots = {
            Padding: [],
            Application: [],
            SeekTable: [],
            VorbisComment: [],
            Cuesheet: [],
            Picture: [],
        }
        self._blocks = []
        self._skipped = []

    def read(self, data):
        """Decode the metadata section of data, raising DecodeError on failure."""
        self.state = State.EXPECT_MAGIC
        self.error = None
        self._reset()
        try:
            return self._run(ByteCursor(data))
        except DecodeError as e:
            self.state = State.FAILED
            self.error = e
            logger.debug('metadata decode failed: %s', e)
            raise

    def _run(self, cursor):
        try:
            cursor.parse(flac.MagicFormat)
        except (ConstructError, DecodeError):
            raise NotFlacError('stream does not start with fLaC')
        self.state = State.EXPECT_BLOCK

        while self.state == State.EXPECT_BLOCK:
            result = self.dispatcher.dispatch(cursor)
            self._add(result.block)
            if result.is_final:
                self.state = State.DONE

        if self._stream_info is None:
            raise MalformedStreamInfoError('stream has no STREAMINFO block')

        logger.debug('read %d metadata blocks, audio starts at byte %d',
                     len(self._blocks) + len(self._skipped), cursor.absolute())
        return self.metadata(cursor.absolute())

    def _add(self, block):
        first = not self._blocks and not self._skipped

        if isinstance(block, StreamInfo):
            if not first:
                raise MalformedStreamInfoError('STREAMINFO must be the first and only STREAMINFO block')
            self._stream_info = block
        elif first:
            raise MalformedStreamInfoError(f'first metadata block is {block.header.name}, expected STREAMINFO')
        elif isinstance(block, SkippedBlock):
            self._skipped.append(block.header)
            return
        else:
            self._slots[type(block)].append(block)

        self._blocks.append(block)

    def metadata(self, audio_offset=None):
        """Snapshot of what has been decoded so far."""
        return FlacMetadata(
            stream_info=self._stream_info,
            paddings=tuple(self._slots[Padding]),
            applications=tuple(self._slots[Application]),
            seek_tables=tuple(self._slots[SeekTable]),
            vorbis_comments=tuple(self._slots[VorbisComment]),
            cuesheets=tuple(self._slots[Cuesheet]),
            pictures=tuple(self._slots[Picture]),
            blocks=tuple(self._blocks),
            skipped=tuple(self._skipped),
            audio_offset=audio_offset,
        )


def read_metadata(data):
    return MetadataReader.from_bytes(data)


def read_metadata_file(path):
    return MetadataReader.from_path(path)


def decode(data, partial=False):
    """Decode data into a DecodeResult. Decode errors are returned, not raised.

    With partial=True a failed result also carries the blocks decoded
    before the failure.
    """
    reader = MetadataReader()
    try:
        return DecodeResult(reader.read(data), None)
    except DecodeError as e:
        return DecodeResult(reader.metadata() if partial else None, e)


def decode_file(path, partial=False):
    try:
        data = read_file(path)
    except FlacIOError as e:
        return DecodeResult(None, e)
    return decode(data, partial)
