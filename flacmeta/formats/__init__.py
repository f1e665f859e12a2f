from . import flac, application, cuesheet, padding, picture, seektable, streaminfo, vorbis
