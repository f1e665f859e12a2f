import pytest

from builders import (block, cuesheet_body, flac, minimal_flac, picture_body, seekpoint,
                      streaminfo_body, vorbis_body)
from flacmeta import (PLACEHOLDER_SAMPLE, DecodeError, ErrorKind, FlacIOError, MetadataReader,
                      NotFlacError, State, decode, decode_file, read_metadata, read_metadata_file)

AUDIO = b'\xff\xf8\x69\x08' + bytes(32)


def full_flac():
    return flac(
        block(0, streaminfo_body()),
        block(3, seekpoint(0, 0, 4096) + seekpoint(PLACEHOLDER_SAMPLE, 0, 0)),
        block(4, vorbis_body('libFLAC', ['ARTIST=A', 'artist=B', 'TITLE=T'])),
        block(2, b'ABCDdata'),
        block(6, picture_body(picture_type=3)),
        block(6, picture_body(picture_type=4, description='back')),
        block(5, cuesheet_body(tracks=[(0, 1, b'', False, False, [(0, 1)]),
                                       (1000, 170, b'', False, False, [])])),
        block(1, bytes(100), last=True),
    ) + AUDIO


class TestTerminalBlock:
    def test_only_streaminfo(self):
        result = decode(minimal_flac())
        assert result.ok
        meta = result.metadata
        assert meta.stream_info.sample_rate == 44100
        assert meta.paddings == ()
        assert meta.applications == ()
        assert meta.seek_tables == ()
        assert meta.vorbis_comments == ()
        assert meta.cuesheets == ()
        assert meta.pictures == ()
        assert meta.skipped == ()
        assert meta.blocks == (meta.stream_info,)
        assert meta.tags == {}
        assert meta.audio_offset == 42

    def test_stops_after_final_block(self):
        # Bytes after the final block are audio and are never looked at.
        result = decode(minimal_flac(audio=b'\x7f\xff\xff\xff' + b'garbage'))
        assert result.ok
        assert len(result.metadata.blocks) == 1
        assert result.metadata.audio_offset == 42


class TestMagic:
    @pytest.mark.parametrize('data', [
        b'',
        b'fLa',
        b'FLAC' + minimal_flac()[4:],
        b'OggS' + minimal_flac()[4:],
        b'ID3\x04' + minimal_flac(),
    ])
    def test_not_flac(self, data):
        result = decode(data)
        assert not result.ok
        assert result.metadata is None
        assert isinstance(result.error, NotFlacError)
        assert result.error.kind == ErrorKind.NOT_FLAC

    def test_raising_flavour(self):
        with pytest.raises(NotFlacError):
            read_metadata(b'RIFF....WAVE')


class TestFullStream:
    def test_all_block_types(self):
        meta = read_metadata(full_flac())
        assert meta.stream_info.channels == 2
        assert len(meta.seek_tables) == 1
        assert meta.seek_tables[0].points[1].is_placeholder
        assert meta.tags == {'ARTIST': ['A', 'B'], 'TITLE': ['T']}
        assert meta.vorbis_comments[0].vendor == 'libFLAC'
        assert meta.applications[0].app_id == 0x41424344
        assert [p.description for p in meta.pictures] == ['cover', 'back']
        assert meta.cuesheets[0].lead_out.number == 170
        assert meta.padding_size == 100
        assert meta.audio_offset == len(full_flac()) - len(AUDIO)

    def test_blocks_in_file_order(self):
        meta = read_metadata(full_flac())
        assert [b.header.name for b in meta.blocks] == [
            'STREAMINFO', 'SEEKTABLE', 'VORBIS_COMMENT', 'APPLICATION',
            'PICTURE', 'PICTURE', 'CUESHEET', 'PADDING']
        assert meta.blocks[-1].header.is_final
        assert not any(b.header.is_final for b in meta.blocks[:-1])

    def test_deterministic(self):
        data = full_flac()
        assert decode(data) == decode(data)
        assert decode(bytearray(data)).metadata == decode(data).metadata

    def test_unknown_block_is_recorded_and_skipped(self):
        data = flac(block(0, streaminfo_body()), block(42, b'\x01\x02\x03'), block(1, bytes(8), last=True))
        meta = read_metadata(data)
        assert [h.type_code for h in meta.skipped] == [42]
        assert len(meta.blocks) == 2
        assert meta.paddings[0].length == 8


class TestFailures:
    def test_missing_final_block(self):
        result = decode(flac(block(0, streaminfo_body())))
        assert result.error.kind == ErrorKind.OUT_OF_BOUNDS

    def test_declared_size_past_end(self):
        result = decode(flac(block(0, streaminfo_body()), block(1, bytes(10), last=True, size=5000)))
        assert result.error.kind == ErrorKind.MALFORMED_HEADER

    def test_forbidden_block_type(self):
        result = decode(flac(block(0, streaminfo_body()), block(127, b'', last=True)))
        assert result.error.kind == ErrorKind.MALFORMED_HEADER

    def test_first_block_must_be_streaminfo(self):
        result = decode(flac(block(1, bytes(4)), block(0, streaminfo_body(), last=True)))
        assert result.error.kind == ErrorKind.MALFORMED_STREAMINFO

    def test_no_streaminfo_at_all(self):
        result = decode(flac(block(9, b'xyz', last=True)))
        assert not result.ok
        assert result.error.kind == ErrorKind.MALFORMED_STREAMINFO
        assert result.metadata is None

    def test_unknown_block_before_streaminfo(self):
        result = decode(flac(block(9, b'xyz'), block(0, streaminfo_body(), last=True)))
        assert not result.ok
        assert result.error.kind == ErrorKind.MALFORMED_STREAMINFO

    def test_second_streaminfo(self):
        result = decode(flac(block(0, streaminfo_body()), block(0, streaminfo_body(), last=True)))
        assert result.error.kind == ErrorKind.MALFORMED_STREAMINFO

    def test_decoder_errors_abort(self):
        data = flac(block(0, streaminfo_body()), block(3, bytes(20)), block(1, b'', last=True))
        result = decode(data)
        assert result.error.kind == ErrorKind.MALFORMED_SEEKTABLE
        assert result.metadata is None

    def test_picture_overrun_in_stream(self):
        data = flac(block(0, streaminfo_body()), block(6, picture_body(data_length=1 << 31), last=True))
        assert decode(data).error.kind == ErrorKind.TRUNCATED_PICTURE

    def test_every_truncation_fails_cleanly(self):
        data = full_flac()
        end = len(data) - len(AUDIO)
        for size in range(end):
            result = decode(data[:size])
            assert not result.ok, size
            assert isinstance(result.error, DecodeError)
        assert decode(data[:end]).ok

    def test_unwrap(self):
        with pytest.raises(NotFlacError):
            decode(b'nope').unwrap()
        assert decode(minimal_flac()).unwrap().stream_info.bits_per_sample == 16


class TestPartial:
    def test_keeps_blocks_before_failure(self):
        data = flac(
            block(0, streaminfo_body()),
            block(4, vorbis_body('v', ['ARTIST=A'])),
            block(5, cuesheet_body(tracks=[]), last=True),
        )
        result = decode(data, partial=True)
        assert result.error.kind == ErrorKind.MALFORMED_CUESHEET
        assert result.metadata.stream_info.sample_rate == 44100
        assert result.metadata.tags == {'ARTIST': ['A']}
        assert result.metadata.cuesheets == ()
        assert result.metadata.audio_offset is None

    def test_default_discards(self):
        data = flac(block(0, streaminfo_body()), block(5, cuesheet_body(tracks=[]), last=True))
        assert decode(data).metadata is None

    def test_not_flac_has_empty_partial(self):
        result = decode(b'nope', partial=True)
        assert result.metadata.stream_info is None
        assert result.metadata.blocks == ()


class TestReaderState:
    def test_done(self):
        reader = MetadataReader()
        assert reader.state == State.EXPECT_MAGIC
        reader.read(minimal_flac())
        assert reader.state == State.DONE
        assert reader.error is None

    def test_failed(self):
        reader = MetadataReader()
        with pytest.raises(NotFlacError):
            reader.read(b'nope')
        assert reader.state == State.FAILED
        assert isinstance(reader.error, NotFlacError)

    def test_reusable(self):
        reader = MetadataReader()
        with pytest.raises(DecodeError):
            reader.read(flac(block(0, streaminfo_body())))
        meta = reader.read(full_flac())
        assert reader.state == State.DONE
        assert len(meta.pictures) == 2


class TestFiles:
    def test_decode_file(self, tmp_path):
        path = tmp_path / 'song.flac'
        path.write_bytes(full_flac())
        result = decode_file(path)
        assert result.ok
        assert result.metadata == decode(full_flac()).metadata
        assert decode_file(str(path)).ok
        assert read_metadata_file(path).stream_info.total_samples == 1000000

    def test_missing_file(self, tmp_path):
        result = decode_file(tmp_path / 'missing.flac')
        assert result.error.kind == ErrorKind.IO_FAILURE
        assert isinstance(result.error.__cause__, OSError)
        assert result.metadata is None

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FlacIOError):
            read_metadata_file(tmp_path / 'missing.flac')

    def test_directory(self, tmp_path):
        assert decode_file(tmp_path).error.kind == ErrorKind.IO_FAILURE

    def test_not_flac_file(self, tmp_path):
        path = tmp_path / 'song.mp3'
        path.write_bytes(b'ID3\x03' + bytes(100))
        assert decode_file(path).error.kind == ErrorKind.NOT_FLAC
