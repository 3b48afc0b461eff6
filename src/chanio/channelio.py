"""
channelio
---------

Provide a readable file-like interface to a channel of chunks.

"""
from . import baseio
from .channel import ChannelClosed


class ChannelRawIO(baseio.StreamRawIOBase):
    r"""Readable binary file-like interface to a channel of text and/or
    bytes chunks.

    ``ChannelRawIO`` receives from any ``chanio.Channel``, (or its
    receive-only view, ``chanio.ReceiveChannel``), as its consumer reads,
    offering methods ``readinto(buffer)``, ``read([size])``,
    ``readline()``, *etc.*

    Chunks of text are encoded, (according to ``encoding``), as they
    are received; thereafter, text and bytes are treated alike.

    At most one chunk is received per read -- and, none at all, if the
    unread remainder of the previous chunk fills the read. Reads block
    only on that receive, until either the producer sends a chunk or
    the channel is closed.

    For example, given a producer, sending chunks at its own pace::

        >>> channel = Channel()

        >>> def produce():
        ...     channel.send('ab')
        ...     channel.send(b'cd')
        ...     channel.close()

        >>> threading.Thread(target=produce).start()

    ...a consumer may read into fixed-size blocks, receiving at most one
    chunk per read::

        >>> reader = ChannelRawIO(channel.receiver())

        >>> buffer = bytearray(3)

        >>> reader.fill(buffer)
        ReadResult(written=2, eof=False)

        >>> buffer[:2]
        bytearray(b'ab')

        >>> reader.fill(buffer)
        ReadResult(written=2, eof=False)

        >>> reader.fill(buffer)
        ReadResult(written=0, eof=True)

    Consumers which would rather have their reads filled, across chunks,
    may wrap the reader in ``io.BufferedReader`` -- here, reading
    ``other_channel``, to which the producer sent the same chunks::

        >>> buffered = io.BufferedReader(ChannelRawIO(other_channel))

        >>> buffered.read(3)
        b'abc'

        >>> buffered.read(3)
        b'd'

    Closing a ``ChannelRawIO`` does **not** close its channel. (See
    ``ClosingChannelRawIO``.)

    ``ChannelRawIO`` is neither seekable nor writable; and, it must not
    be read by more than one thread at a time.

    """
    encoding = 'utf-8'

    def __init__(self, channel, encoding=None):
        super().__init__()
        self.channel = channel
        self.encoding = encoding or self.encoding

    def __repr__(self):
        return f"<{self.__class__.__name__} channel={self.channel!r}>"

    def __next_chunk__(self):
        self._print_log('receive')

        try:
            chunk = next(self.channel)
        except StopIteration:
            self._print_log('receive', 'closed')
            raise

        self._print_log('receive', '%r', chunk)
        return self._encode_chunk(chunk)

    def _encode_chunk(self, chunk):
        if isinstance(chunk, str):
            return chunk.encode(self.encoding)

        if isinstance(chunk, bytes):
            return chunk

        # copy mutable buffers as received
        try:
            return memoryview(chunk).tobytes()
        except TypeError:
            raise TypeError(f"chunk must be str or bytes-like, "
                            f"not {chunk.__class__.__name__}") from None


class ClosingChannelRawIO(ChannelRawIO):
    """``ChannelRawIO`` which closes its channel when it is closed.

    For use with (closable) ``chanio.Channel``, where the consumer
    decides when the producer must stop::

        >>> with ClosingChannelRawIO(channel) as reader:
        ...     header = reader.read(64)

        >>> channel.send('more')
        Traceback (most recent call last):
          ...
        chanio.channel.ChannelClosed: send on closed channel

    As with the channel itself, closing twice is an error, (raising
    ``chanio.ChannelClosed``); and so is closing a reader whose
    channel the producer has already closed. (For such channels, read
    through ``ChannelRawIO`` instead.)

    The channel is **not** closed when an unclosed reader is garbage-
    collected, (as it would be by ``io``'s default finalizer): the
    producer may yet be sending to it, or may close it itself.

    """
    def close(self):
        self._print_log('close')

        try:
            self.channel.close()
        finally:
            super().close()

    def __del__(self):
        pass
