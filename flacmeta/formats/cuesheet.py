from construct import *
from flacmeta import base
from flacmeta.blocks import BlockType, Cuesheet, CuesheetIndex, CuesheetTrack
from flacmeta.errors import MalformedCuesheetError

CuesheetFormat = Struct(
    'catalog_number' / Bytes(128),
    'lead_in_samples' / Int64ub,
    'flags' / BitStruct(
        'compact_disc' / Flag,
        Padding(7),
    ),
    Padding(258),
    'track_count' / Int8ub,
)

TrackFormat = Struct(
    'offset' / Int64ub,
    'number' / Int8ub,
    'isrc' / Bytes(12),
    'flags' / BitStruct(
        'non_audio' / Flag,
        'pre_emphasis' / Flag,
        Padding(6),
    ),
    Padding(13),
    'index_count' / Int8ub,
)

IndexFormat = Struct(
    'offset' / Int64ub,
    'number' / Int8ub,
    Padding(3),
)


def text(b):
    return b.rstrip(b'\0').decode('ascii', 'replace')


def check_count(cursor, count, format, what):
    needed = count * format.sizeof()
    if needed > cursor.remaining():
        raise MalformedCuesheetError(
            f'{count} {what} need {needed} bytes, {cursor.remaining()} left in CUESHEET body')


class Decoder(base.BlockDecoder):
    block_type = BlockType.CUESHEET
    error = MalformedCuesheetError

    def load(self, header, cursor):
        sheet = cursor.parse(CuesheetFormat)

        # At least the lead-out track.
        if sheet.track_count < 1:
            raise MalformedCuesheetError('CUESHEET has no tracks')
        check_count(cursor, sheet.track_count, TrackFormat, 'tracks')

        tracks = []
        for _ in range(sheet.track_count):
            track = cursor.parse(TrackFormat)
            check_count(cursor, track.index_count, IndexFormat, 'index points')
            indexes = []
            for _ in range(track.index_count):
                index = cursor.parse(IndexFormat)
                indexes.append(CuesheetIndex(index.offset, index.number))
            tracks.append(CuesheetTrack(track.offset, track.number, text(track.isrc),
                                        not track.flags.non_audio, track.flags.pre_emphasis,
                                        tuple(indexes)))

        return Cuesheet(header, text(sheet.catalog_number), sheet.lead_in_samples,
                        sheet.flags.compact_disc, tuple(tracks))
