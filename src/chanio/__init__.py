"""
Chan I/O: Read channels of chunks as streams.

Chanio connects producers which emit chunks of text or bytes, at their
own pace, to consumers which expect to read a file-like object -- and,
for good measure, constructs the same readers from literal text, bytes
and buffers.

"""
from .baseio import (IOClosed, ReadResult, StreamRawIOBase)
from .channel import (Channel, ChannelClosed, ReceiveChannel)
from .channelio import (ChannelRawIO, ClosingChannelRawIO)
from .pipeio import ProducerRawIO, pipe_chunks
from .sources import (
    open_reader,
    open_text,
    reader_from_buffer,
    reader_from_bytes,
    reader_from_channel,
    reader_from_receiver,
    reader_from_stream,
    reader_from_text,
    UnsupportedSource,
)


__all__ = (
    'IOClosed',
    'ReadResult',
    'StreamRawIOBase',
    'Channel',
    'ChannelClosed',
    'ReceiveChannel',
    'ChannelRawIO',
    'ClosingChannelRawIO',
    'ProducerRawIO',
    'pipe_chunks',
    'open_reader',
    'open_text',
    'reader_from_buffer',
    'reader_from_bytes',
    'reader_from_channel',
    'reader_from_receiver',
    'reader_from_stream',
    'reader_from_text',
    'UnsupportedSource',
)


__version__ = '0.1.0'
