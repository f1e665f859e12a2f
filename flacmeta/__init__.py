from .blocks import (PLACEHOLDER_SAMPLE, Application, BlockType, Cuesheet, CuesheetIndex,
                     CuesheetTrack, FlacMetadata, MetaBlockHeader, Padding, Picture, PictureType,
                     SeekPoint, SeekTable, SkippedBlock, StreamInfo, VorbisComment)
from .core import (DecodeResult, MetadataReader, State, decode, decode_file, read_metadata,
                   read_metadata_file)
from .cursor import ByteCursor
from .dispatch import BlockDispatcher, DispatchResult
from .errors import (DecodeError, ErrorKind, FlacIOError, MalformedCuesheetError,
                     MalformedHeaderError, MalformedSeekTableError, MalformedStreamInfoError,
                     NotFlacError, OutOfBoundsError, TruncatedPictureError)
