from collections import OrderedDict, namedtuple
from enum import IntEnum


PLACEHOLDER_SAMPLE = 0xFFFFFFFFFFFFFFFF


class BlockType(IntEnum):
    STREAMINFO = 0
    PADDING = 1
    APPLICATION = 2
    SEEKTABLE = 3
    VORBIS_COMMENT = 4
    CUESHEET = 5
    PICTURE = 6


# Same numbering as ID3v2 APIC frames.
class PictureType(IntEnum):
    OTHER = 0
    FILE_ICON = 1
    OTHER_FILE_ICON = 2
    FRONT_COVER = 3
    BACK_COVER = 4
    LEAFLET_PAGE = 5
    MEDIA = 6
    LEAD_ARTIST = 7
    ARTIST = 8
    CONDUCTOR = 9
    BAND = 10
    COMPOSER = 11
    LYRICIST = 12
    RECORDING_LOCATION = 13
    DURING_RECORDING = 14
    DURING_PERFORMANCE = 15
    SCREEN_CAPTURE = 16
    FISH = 17
    ILLUSTRATION = 18
    BAND_LOGOTYPE = 19
    PUBLISHER_LOGOTYPE = 20


class MetaBlockHeader(namedtuple('MetaBlockHeader', 'is_final type_code size')):
    __slots__ = ()

    @property
    def block_type(self):
        try:
            return BlockType(self.type_code)
        except ValueError:
            return None

    @property
    def name(self):
        block_type = self.block_type
        if block_type is None:
            return f'UNKNOWN({self.type_code})'
        return block_type.name


class StreamInfo(namedtuple('StreamInfo', [
        'header', 'min_block_size', 'max_block_size', 'min_frame_size', 'max_frame_size',
        'sample_rate', 'channels', 'bits_per_sample', 'total_samples', 'md5'])):
    """Core stream parameters.

    Frame sizes, the sample rate and the total sample count use 0 for
    "unknown". channels and bits_per_sample are real values, not the
    stored value-minus-one.
    """
    __slots__ = ()

    @property
    def duration(self):
        if not self.sample_rate or not self.total_samples:
            return None
        return self.total_samples / self.sample_rate

    @property
    def md5_hex(self):
        return self.md5.hex()


class Padding(namedtuple('Padding', 'header length')):
    __slots__ = ()


class Application(namedtuple('Application', 'header app_id data')):
    __slots__ = ()


class SeekPoint(namedtuple('SeekPoint', 'sample_number frame_offset sample_count')):
    __slots__ = ()

    @property
    def is_placeholder(self):
        return self.sample_number == PLACEHOLDER_SAMPLE


class SeekTable(namedtuple('SeekTable', 'header points')):
    __slots__ = ()


def split_comment(comment):
    """Split a KEY=VALUE entry on the first '='.

    An entry without '=' becomes a key with an empty value.
    """
    key, _, value = comment.partition('=')
    return key.upper(), value


class VorbisComment(namedtuple('VorbisComment', 'header vendor comments')):
    """Vendor string plus the raw KEY=VALUE entries, in file order.

    Keys compare case-insensitively; repeated keys accumulate values.
    """
    __slots__ = ()

    @property
    def entries(self):
        return [split_comment(comment) for comment in self.comments]

    @property
    def tags(self):
        tags = OrderedDict()
        for key, value in self.entries:
            tags.setdefault(key, []).append(value)
        return tags

    def get(self, key):
        key = key.upper()
        return [value for k, value in self.entries if k == key]


class CuesheetIndex(namedtuple('CuesheetIndex', 'offset number')):
    __slots__ = ()


class CuesheetTrack(namedtuple('CuesheetTrack', 'offset number isrc is_audio pre_emphasis indexes')):
    __slots__ = ()


class Cuesheet(namedtuple('Cuesheet', 'header catalog_number lead_in_samples is_compact_disc tracks')):
    __slots__ = ()

    @property
    def lead_out(self):
        return self.tracks[-1]


class Picture(namedtuple('Picture', [
        'header', 'picture_type', 'mime', 'description', 'width', 'height',
        'depth', 'colors', 'data'])):
    __slots__ = ()

    @property
    def kind(self):
        try:
            return PictureType(self.picture_type)
        except ValueError:
            return None


class SkippedBlock(namedtuple('SkippedBlock', 'header')):
    __slots__ = ()


class FlacMetadata(namedtuple('FlacMetadata', [
        'stream_info', 'paddings', 'applications', 'seek_tables', 'vorbis_comments',
        'cuesheets', 'pictures', 'blocks', 'skipped', 'audio_offset'])):
    """Everything decoded from the metadata section of one stream.

    stream_info is a single value; every other block type is a tuple in
    file order. blocks holds all decoded blocks in file order, skipped the
    headers of blocks with an unknown type code.
    """
    __slots__ = ()

    @property
    def tags(self):
        if not self.vorbis_comments:
            return OrderedDict()
        return self.vorbis_comments[0].tags

    @property
    def padding_size(self):
        return sum(padding.length for padding in self.paddings)
