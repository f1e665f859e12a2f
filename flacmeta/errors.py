from enum import Enum


class ErrorKind(Enum):
    IO_FAILURE = 'io-failure'
    NOT_FLAC = 'not-flac'
    MALFORMED_HEADER = 'malformed-header'
    OUT_OF_BOUNDS = 'out-of-bounds'
    MALFORMED_STREAMINFO = 'malformed-streaminfo'
    MALFORMED_SEEKTABLE = 'malformed-seektable'
    TRUNCATED_PICTURE = 'truncated-picture'
    MALFORMED_CUESHEET = 'malformed-cuesheet'


class DecodeError(Exception):
    kind = None


class FlacIOError(DecodeError):
    kind = ErrorKind.IO_FAILURE


class NotFlacError(DecodeError):
    kind = ErrorKind.NOT_FLAC


class MalformedHeaderError(DecodeError):
    kind = ErrorKind.MALFORMED_HEADER


class OutOfBoundsError(DecodeError):
    kind = ErrorKind.OUT_OF_BOUNDS


class MalformedStreamInfoError(DecodeError):
    kind = ErrorKind.MALFORMED_STREAMINFO


class MalformedSeekTableError(DecodeError):
    kind = ErrorKind.MALFORMED_SEEKTABLE


class TruncatedPictureError(DecodeError):
    kind = ErrorKind.TRUNCATED_PICTURE


class MalformedCuesheetError(DecodeError):
    kind = ErrorKind.MALFORMED_CUESHEET
