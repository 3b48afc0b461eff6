"""
pipeio
------

Read the chunks sent by a producer function as a stream.

``ProducerRawIO`` runs a producer -- any callable which sends text
and/or bytes chunks to a ``chanio.Channel`` -- in an in-process thread,
and provides a *readable* interface to what it sends.

"""
import threading

from . import channelio
from .channel import Channel, ChannelClosed


class ProducerRawIO(channelio.ChannelRawIO):
    r"""Iteratively stream the chunks sent by the given function through
    a readable binary file-like interface.

    The producer is invoked, (in a writer thread), upon the first read,
    with a newly-constructed ``Channel`` as its first argument. Its
    sends are blocked while ``buffer_size`` chunks are pending; and,
    the channel is closed on its behalf when it returns.

    For example, consider the following producer::

        >>> def send_greeting(channel, name):
        ...     channel.send("Hi there, ")
        ...     channel.send(name)
        ...     channel.send(b".\r\n")

    ...whose chunks may be read as a stream::

        >>> with ProducerRawIO(send_greeting, args=['Betina']) as reader:
        ...     reader.read()
        b'Hi there, Betina.\r\n'

    Should the producer raise an exception, this is re-raised by the
    read which would otherwise report the end of the stream, (*i.e.*
    after all chunks sent before the failure have been read).

    Closing the reader closes the channel, (if the producer has not
    finished), such that its next send raises ``chanio.ChannelClosed``
    -- which ``ProducerRawIO`` takes as the signal to stop, and does
    not report.

    Consider also the above example with the helper ``pipe_chunks``::

        >>> with pipe_chunks(send_greeting, 'Betina') as reader:
        ...     reader.read()
        b'Hi there, Betina.\r\n'

    """
    buffer_queue_size = 10

    thread_daemon = True

    def __init__(self, producer_func, args=None, kwargs=None, buffer_size=None, encoding=None):
        self.buffer_queue_size = buffer_size or self.buffer_queue_size

        super().__init__(Channel(self.buffer_queue_size), encoding)

        self.__producer_func__ = producer_func
        self.__producer_args__ = args
        self.__producer_kwargs__ = kwargs

        self._producer = threading.Thread(
            daemon=self.thread_daemon,
            target=self._producer_send,
        )
        self._producer_started = False
        self._producer_exc = None

        self._close_lock = threading.Lock()

    def _ensure_started(self):
        if not self._producer_started:
            self._producer.start()
            self._producer_started = True
            self._print_log('producer', 'started')

    def _close_channel(self):
        with self._close_lock:
            if not self.channel.closed:
                self.channel.close()

    def __next_chunk__(self):
        self._ensure_started()

        try:
            return super().__next_chunk__()
        except StopIteration:
            # set before the channel is closed -- so, visible by now
            if self._producer_exc:
                raise self._producer_exc

            raise

    def _producer_send(self):
        args = self.__producer_args__ or ()
        kwargs = self.__producer_kwargs__ or {}
        try:
            self.__producer_func__(self.channel, *args, **kwargs)
        except ChannelClosed:
            self._print_log('producer', 'killed')
        except Exception as exc:
            self._print_log('producer', 'error: %r', exc)
            self._producer_exc = exc
        else:
            self._print_log('producer', 'done')
        finally:
            self._close_channel()

    def close(self):
        self._close_channel()
        super().close()


def pipe_chunks(producer_func, *args, buffer_size=None, encoding=None, **kwargs):
    return ProducerRawIO(
        producer_func,
        args=args,
        kwargs=kwargs,
        buffer_size=buffer_size,
        encoding=encoding,
    )


pipe_chunks.__doc__ = ProducerRawIO.__doc__
