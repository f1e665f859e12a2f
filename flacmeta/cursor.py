from construct import Int8ub, Int16ub, Int24ub, Int32ub, Int32ul, Int64ub
from .errors import OutOfBoundsError


class ByteCursor:
    """Bounds-checked reader over an immutable byte buffer.

    A cursor covers the half-open range [start, end) of its buffer. Views
    created with view() share the buffer but are clipped to the requested
    length, so a block decoder can never read into the next block.

    Bit reads keep their own offset inside the current byte. Any byte-level
    read discards a partially consumed byte first.
    """

    def __init__(self, data, start=0, end=None):
        if not isinstance(data, bytes):
            data = bytes(data)
        if end is None:
            end = len(data)
        if not 0 <= start <= end <= len(data):
            raise OutOfBoundsError(f'invalid view [{start}, {end}) over {len(data)} bytes')
        self._data = data
        self._start = start
        self._pos = start
        self._end = end
        self._bit = 0

    def tell(self):
        """Position relative to the start of this view."""
        return self._pos - self._start

    def absolute(self):
        return self._pos

    def remaining(self):
        return self._end - self._pos

    def align(self):
        if self._bit:
            self._pos += 1
            self._bit = 0

    def _need(self, count):
        if count < 0:
            raise OutOfBoundsError(f'negative read of {count} bytes')
        if count > self._end - self._pos:
            raise OutOfBoundsError(
                f'read of {count} bytes at offset {self.tell()} overruns view '
                f'({self.remaining()} bytes left)')

    def skip(self, count):
        self.align()
        self._need(count)
        self._pos += count

    def read_exact(self, count):
        self.align()
        self._need(count)
        chunk = self._data[self._pos:self._pos + count]
        self._pos += count
        return chunk

    def view(self, count):
        """Carve the next count bytes off as an independent cursor."""
        self.align()
        self._need(count)
        sub = ByteCursor(self._data, self._pos, self._pos + count)
        self._pos += count
        return sub

    def parse(self, format):
        """Parse a fixed-size construct format at the current position."""
        return format.parse(self.read_exact(format.sizeof()))

    def read_u8(self):
        return self.parse(Int8ub)

    def read_u16be(self):
        return self.parse(Int16ub)

    def read_u24be(self):
        return self.parse(Int24ub)

    def read_u32be(self):
        return self.parse(Int32ub)

    def read_u32le(self):
        return self.parse(Int32ul)

    def read_u64be(self):
        return self.parse(Int64ub)

    def read_bits(self, count):
        """Read count bits, most significant first, from the bit position."""
        if count <= 0:
            raise ValueError('bit count must be positive')
        total = self._bit + count
        size = (total + 7) // 8
        self._need(size)
        chunk = int.from_bytes(self._data[self._pos:self._pos + size], 'big')
        value = (chunk >> (size * 8 - total)) & ((1 << count) - 1)
        self._pos += total // 8
        self._bit = total % 8
        return value
