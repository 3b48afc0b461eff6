"""
sources
-------

Construct readers from the supported sources of data.

Each supported shape of source has its own constructor; and,
``open_reader`` selects among these according to the type of its
argument.

"""
import functools
import io

from .channel import Channel, ReceiveChannel
from .channelio import ChannelRawIO, ClosingChannelRawIO


class UnsupportedSource(TypeError):
    """Exception indicating that no reader may be constructed from the
    given source.

    The type of the rejected source is available as ``source_type``.

    """
    def __init__(self, source_type, *args):
        if not args:
            args = (f"cannot construct reader from {source_type.__name__}",)

        super().__init__(*args)
        self.source_type = source_type


def reader_from_text(text, encoding=None):
    return io.BytesIO(text.encode(encoding or ChannelRawIO.encoding))


def reader_from_bytes(data):
    return io.BytesIO(data)


def reader_from_buffer(buffer):
    """Construct a reader over a copy of the content of ``buffer``,
    (*e.g.* a ``bytearray`` or ``memoryview``).

    """
    return io.BytesIO(bytes(buffer))


def reader_from_stream(stream):
    return stream


def reader_from_channel(channel, encoding=None):
    """Construct a reader which closes ``channel`` when it is closed.

    See: ``chanio.ClosingChannelRawIO``.

    """
    return ClosingChannelRawIO(channel, encoding)


def reader_from_receiver(receiver, encoding=None):
    """Construct a reader which only receives from ``receiver``.

    See: ``chanio.ChannelRawIO``.

    """
    return ChannelRawIO(receiver, encoding)


@functools.singledispatch
def open_reader(source, encoding=None):
    """Construct a readable file-like object from ``source``.

    Sources are mapped to readers as follows:

    * ``str``: ``reader_from_text``, (encoded according to ``encoding``)
    * ``bytes``: ``reader_from_bytes``
    * ``bytearray`` or ``memoryview``: ``reader_from_buffer``
    * ``chanio.Channel``: ``reader_from_channel``
    * ``chanio.ReceiveChannel``: ``reader_from_receiver``
    * any object with a ``read`` method: ``reader_from_stream``, (*i.e.*
      the source itself)

    For example::

        >>> open_reader('Hi there.\\r\\n').read()
        b'Hi there.\\r\\n'

        >>> open_reader(42)
        Traceback (most recent call last):
          ...
        chanio.sources.UnsupportedSource: cannot construct reader from int

    Any other source raises ``UnsupportedSource``.

    """
    if callable(getattr(source, 'read', None)):
        return reader_from_stream(source)

    raise UnsupportedSource(type(source))


@open_reader.register(str)
def _open_text_reader(source, encoding=None):
    return reader_from_text(source, encoding)


@open_reader.register(bytes)
def _open_bytes_reader(source, encoding=None):
    return reader_from_bytes(source)


@open_reader.register(bytearray)
@open_reader.register(memoryview)
def _open_buffer_reader(source, encoding=None):
    return reader_from_buffer(source)


@open_reader.register(io.IOBase)
def _open_stream_reader(source, encoding=None):
    return reader_from_stream(source)


@open_reader.register(Channel)
def _open_channel_reader(source, encoding=None):
    return reader_from_channel(source, encoding)


@open_reader.register(ReceiveChannel)
def _open_receiver_reader(source, encoding=None):
    return reader_from_receiver(source, encoding)


def open_text(source, encoding=None, errors=None, newline=None):
    r"""Construct a readable text file-like object from ``source``.

    The binary reader constructed by ``open_reader`` is decoded by
    ``io.TextIOWrapper``, (via ``io.BufferedReader`` where the reader
    is unbuffered). Text streams are returned as they are.

    Closing (or collecting) the text reader closes the reader beneath
    it -- and so, for a ``chanio.Channel``, the channel itself.

    Such a text reader may be read by line::

        >>> channel = Channel()

        >>> for chunk in ('Transaction_date,Pro', 'duct\r\n1/2/09 6:17,Product1\r\n'):
        ...     channel.send(chunk)

        >>> channel.close()

        >>> list(open_text(channel.receiver(), newline=''))
        ['Transaction_date,Product\r\n', '1/2/09 6:17,Product1\r\n']

    """
    if isinstance(source, io.TextIOBase):
        return source

    encoding = encoding or ChannelRawIO.encoding
    reader = open_reader(source, encoding=encoding)

    if isinstance(reader, io.TextIOBase):
        return reader

    if isinstance(reader, io.RawIOBase):
        reader = io.BufferedReader(reader)

    return io.TextIOWrapper(reader, encoding=encoding, errors=errors, newline=newline)
