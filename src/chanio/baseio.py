"""
baseio
------

Low-level primitives.

"""
import collections
import io


class IOClosed(ValueError):
    """Exception indicating an attempted operation on a file-like
    object which has been closed.

    """
    _default_message_ = "I/O operation on closed file"

    def __init__(self, *args):
        if not args:
            args = (self._default_message_,)

        super().__init__(*args)


ReadResult = collections.namedtuple('ReadResult', ('written', 'eof'))

ReadResult.__doc__ = """Outcome of a single ``fill`` of a caller-supplied buffer.

``written`` is the number of bytes copied into the buffer; ``eof`` is
``True`` only once the source is exhausted *and* no received bytes
remain to be delivered.

"""


class StreamRawIOBase(io.RawIOBase):
    """Readable binary file-like abstract base class.

    Concrete classes must implement method ``__next_chunk__`` to return
    the next chunk of bytes to be read, (or raise ``StopIteration``
    once there are no more).

    Chunks are retrieved one at a time, and only as required to fill
    the buffers handed to ``readinto``. Whatever part of a chunk does
    not fit into the caller's buffer is held back, and delivered first
    by the next read.

    """
    _log_debug = False

    @classmethod
    def _print_log(cls, where, message='', *message_args):
        if cls._log_debug:
            print('[debug]', '[%s]' % where, message % message_args)

    def __init__(self):
        super().__init__()
        self._remainder = memoryview(b'')

    def __next_chunk__(self):
        raise NotImplementedError("StreamRawIOBase subclasses must implement __next_chunk__")

    def readable(self):
        if self.closed:
            raise IOClosed()

        return True

    def fill(self, buffer):
        """Copy as many available bytes as possible into ``buffer``.

        At most one chunk is retrieved per call; and, none at all if
        the bytes held back from a previous chunk suffice to fill
        ``buffer``.

        Returns a ``ReadResult`` of the number of bytes written and
        whether the end of the stream has been reached.

        """
        if self.closed:
            raise IOClosed()

        view = memoryview(buffer).cast('B')
        size = len(view)

        if size == 0:
            return ReadResult(0, False)

        remainder_len = len(self._remainder)

        if remainder_len > size:
            # buffer is the limit: hand over what fits, hold the rest
            view[:] = self._remainder[:size]
            self._remainder = self._remainder[size:]
            return ReadResult(size, False)

        view[:remainder_len] = self._remainder
        self._remainder = memoryview(b'')

        if remainder_len == size:
            return ReadResult(size, False)

        try:
            chunk = self.__next_chunk__()
        except StopIteration:
            return ReadResult(remainder_len, True)

        chunk = memoryview(chunk).cast('B')
        space = size - remainder_len
        fit = chunk[:space]
        view[remainder_len:(remainder_len + len(fit))] = fit
        self._remainder = chunk[len(fit):]

        return ReadResult(remainder_len + len(fit), False)

    def readinto(self, buffer):
        size = len(memoryview(buffer).cast('B'))

        while True:
            (written, eof) = self.fill(buffer)

            # empty chunks mustn't look like end-of-file to io
            if written or eof or size == 0:
                return written
