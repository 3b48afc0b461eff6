"""
channel
-------

Closable, thread-safe chunk queues.

A ``Channel`` is a ``queue.Queue`` which may be *closed*: once closed,
nothing more may be put to it, and (once drained) gets against it fail
immediately rather than blocking forever. This is what lets a consumer
tell "no chunk yet" apart from "no chunk ever again".

"""
import queue
import time


class ChannelClosed(Exception):
    """Exception indicating an attempted operation on a channel which
    has been closed.

    Raised by sends to -- or by the re-closing of -- a closed channel,
    and by gets against a channel which is both closed and empty.

    """
    _default_message_ = "operation on closed channel"

    def __init__(self, *args):
        if not args:
            args = (self._default_message_,)

        super().__init__(*args)


class Channel(queue.Queue):
    """FIFO queue of chunks, shared between one producer and one
    consumer, which the producer (or consumer) may close.

    For example, a producer thread may send chunks of text or bytes::

        >>> channel = Channel()

        >>> def produce():
        ...     channel.send('hello ')
        ...     channel.send(b'world')
        ...     channel.close()

        >>> threading.Thread(target=produce).start()

    ...which may be received in order, until the channel is closed and
    drained::

        >>> list(channel)
        ['hello ', b'world']

        >>> channel.receive()
        Traceback (most recent call last):
          ...
        chanio.channel.ChannelClosed: operation on closed channel

    As with ``queue.Queue``, ``maxsize`` bounds the number of chunks
    which may be pending; a ``maxsize`` less than or equal to zero
    makes the channel unbounded.

    """
    def __init__(self, maxsize=0):
        super().__init__(maxsize)
        self._closed = False

    def __repr__(self):
        state = 'closed' if self._closed else 'open'
        return f"<{self.__class__.__name__} {state} pending={self.qsize()}>"

    @property
    def closed(self):
        return self._closed

    def close(self):
        """Close the channel.

        Any blocked senders and receivers are woken: senders fail with
        ``ChannelClosed``; receivers fail with ``ChannelClosed`` only
        once no chunks remain.

        Closing a channel twice is an error.

        """
        with self.mutex:
            if self._closed:
                raise ChannelClosed("close of closed channel")

            self._closed = True

            self.not_empty.notify_all()
            self.not_full.notify_all()

    def put(self, item, block=True, timeout=None):
        with self.not_full:
            if self._closed:
                raise ChannelClosed("send on closed channel")

            if self.maxsize > 0:
                if not block:
                    if self._qsize() >= self.maxsize:
                        raise queue.Full
                elif timeout is None:
                    while self._qsize() >= self.maxsize:
                        self.not_full.wait()
                        if self._closed:
                            raise ChannelClosed("send on closed channel")
                elif timeout < 0:
                    raise ValueError("'timeout' must be a non-negative number")
                else:
                    endtime = time.monotonic() + timeout
                    while self._qsize() >= self.maxsize:
                        remaining = endtime - time.monotonic()
                        if remaining <= 0.0:
                            raise queue.Full
                        self.not_full.wait(remaining)
                        if self._closed:
                            raise ChannelClosed("send on closed channel")

            self._put(item)
            self.unfinished_tasks += 1
            self.not_empty.notify()

    def get(self, block=True, timeout=None):
        with self.not_empty:
            if not block:
                if not self._qsize():
                    if self._closed:
                        raise ChannelClosed
                    raise queue.Empty
            elif timeout is None:
                while not self._qsize():
                    if self._closed:
                        raise ChannelClosed
                    self.not_empty.wait()
            elif timeout < 0:
                raise ValueError("'timeout' must be a non-negative number")
            else:
                endtime = time.monotonic() + timeout
                while not self._qsize():
                    if self._closed:
                        raise ChannelClosed
                    remaining = endtime - time.monotonic()
                    if remaining <= 0.0:
                        raise queue.Empty
                    self.not_empty.wait(remaining)

            item = self._get()
            self.not_full.notify()
            return item

    def send(self, chunk):
        """Put ``chunk`` to the channel, blocking while it is full."""
        self.put(chunk)

    def receive(self):
        """Get the next chunk, blocking until one is available.

        Raises ``ChannelClosed`` if the channel is closed and drained.

        """
        return self.get()

    def receiver(self):
        """Construct a receive-only view of this channel."""
        return ReceiveChannel(self)

    def __iter__(self):
        return self

    def __next__(self):
        try:
            return self.get()
        except ChannelClosed:
            raise StopIteration


class ReceiveChannel:
    """Receive-only view of a ``Channel``.

    Offers the receiving half of the channel interface -- ``get``,
    ``receive`` and iteration -- but neither sending nor closing.

    """
    def __init__(self, channel):
        self._channel = channel

    def __repr__(self):
        return f"{self.__class__.__name__}({self._channel!r})"

    @property
    def closed(self):
        return self._channel.closed

    def qsize(self):
        return self._channel.qsize()

    def empty(self):
        return self._channel.empty()

    def get(self, block=True, timeout=None):
        return self._channel.get(block, timeout)

    def receive(self):
        return self._channel.receive()

    def __iter__(self):
        return self

    def __next__(self):
        return next(self._channel)
