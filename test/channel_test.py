import queue
import threading

import pytest

import chanio

from . import ex_csv_stream


class TestChannel:

    @pytest.fixture
    def channel(self):
        return chanio.Channel()

    def test_fifo(self, channel):
        for line in ex_csv_stream():
            channel.send(line)

        assert [channel.receive() for _line in ex_csv_stream()] == list(ex_csv_stream())

    def test_mixed_chunks(self, channel):
        channel.send('hi')
        channel.send(b'there')

        assert channel.receive() == 'hi'
        assert channel.receive() == b'there'

    def test_closed(self, channel):
        assert not channel.closed
        channel.close()
        assert channel.closed

    def test_close_twice(self, channel):
        channel.close()

        with pytest.raises(chanio.ChannelClosed, match='close of closed channel'):
            channel.close()

    def test_send_closed(self, channel):
        channel.close()

        with pytest.raises(chanio.ChannelClosed, match='send on closed channel'):
            channel.send('hi')

        with pytest.raises(chanio.ChannelClosed):
            channel.put_nowait('hi')

    def test_receive_closed_drains(self, channel):
        channel.send('hi')
        channel.send('there')
        channel.close()

        assert channel.receive() == 'hi'
        assert channel.receive() == 'there'

        with pytest.raises(chanio.ChannelClosed):
            channel.receive()

    def test_get_nowait(self, channel):
        with pytest.raises(queue.Empty):
            channel.get_nowait()

        channel.close()

        with pytest.raises(chanio.ChannelClosed):
            channel.get_nowait()

    def test_get_timeout(self, channel):
        with pytest.raises(queue.Empty):
            channel.get(timeout=0.01)

        channel.close()

        with pytest.raises(chanio.ChannelClosed):
            channel.get(timeout=0.01)

    def test_get_timeout_negative(self, channel):
        with pytest.raises(ValueError):
            channel.get(timeout=-1)

    def test_put_full(self):
        channel = chanio.Channel(1)
        channel.send('hi')

        with pytest.raises(queue.Full):
            channel.put_nowait('there')

        with pytest.raises(queue.Full):
            channel.put('there', timeout=0.01)

    def test_unbounded(self, channel):
        for count in range(100):
            channel.put_nowait(count)

        assert channel.qsize() == 100

    @pytest.mark.timeout(2)
    def test_close_wakes_receiver(self, channel):
        closer = threading.Timer(0.05, channel.close)
        closer.start()

        with pytest.raises(chanio.ChannelClosed):
            channel.receive()

        closer.join()

    @pytest.mark.timeout(2)
    def test_close_wakes_timed_receiver(self, channel):
        closer = threading.Timer(0.05, channel.close)
        closer.start()

        with pytest.raises(chanio.ChannelClosed):
            channel.get(timeout=1)

        closer.join()

    @pytest.mark.timeout(2)
    def test_close_wakes_sender(self):
        channel = chanio.Channel(1)
        channel.send('hi')

        closer = threading.Timer(0.05, channel.close)
        closer.start()

        with pytest.raises(chanio.ChannelClosed):
            channel.send('there')

        closer.join()

        # pending chunk survives close
        assert channel.receive() == 'hi'

    @pytest.mark.timeout(2)
    def test_send_wakes_receiver(self, channel):
        sender = threading.Timer(0.05, channel.send, args=['hi'])
        sender.start()

        assert channel.receive() == 'hi'

        sender.join()

    def test_iter(self, channel):
        for line in ex_csv_stream():
            channel.send(line)

        channel.close()

        assert list(channel) == list(ex_csv_stream())
        assert list(channel) == []

    def test_repr(self, channel):
        channel.send('hi')
        assert repr(channel) == '<Channel open pending=1>'

        channel.close()
        assert repr(channel) == '<Channel closed pending=1>'


class TestReceiveChannel:

    @pytest.fixture
    def channel(self):
        return chanio.Channel()

    @pytest.fixture
    def receiver(self, channel):
        return channel.receiver()

    def test_receive(self, channel, receiver):
        channel.send('hi')
        channel.send(b'there')

        assert receiver.qsize() == 2
        assert receiver.receive() == 'hi'
        assert receiver.get() == b'there'
        assert receiver.empty()

    def test_closed(self, channel, receiver):
        assert not receiver.closed
        channel.close()
        assert receiver.closed

        with pytest.raises(chanio.ChannelClosed):
            receiver.receive()

    def test_iter(self, channel, receiver):
        channel.send('hi')
        channel.send('there')
        channel.close()

        assert list(receiver) == ['hi', 'there']

    @pytest.mark.parametrize('method_name', ('close', 'send', 'put', 'put_nowait'))
    def test_receive_only(self, receiver, method_name):
        assert not hasattr(receiver, method_name)


class TestChannelClosed:

    def test_default_message(self):
        assert str(chanio.ChannelClosed()) == "operation on closed channel"

    def test_message(self):
        assert str(chanio.ChannelClosed('nope')) == 'nope'
