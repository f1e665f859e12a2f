from .errors import OutOfBoundsError


class BlockDecoder:
    """Turns the body of one metadata block into a block record.

    Subclasses set block_type and implement load(). A decoder receives a
    cursor clipped to exactly the declared body size; short reads inside
    the body surface as the decoder's own error type when it sets one.
    """
    block_type = None
    error = None

    def decode(self, header, cursor):
        if self.error is None:
            return self.load(header, cursor)
        try:
            return self.load(header, cursor)
        except OutOfBoundsError as e:
            raise self.error(f'{header.name}: {e}') from e

    def load(self, header, cursor):
        raise NotImplementedError()
