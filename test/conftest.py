import threading

import pytest

from . import closed_channel, ex_csv_bytestream, ex_csv_stream


@pytest.fixture
def csv_channel():
    return closed_channel(ex_csv_stream())


@pytest.fixture
def csv_bytechannel():
    return closed_channel(ex_csv_bytestream())


@pytest.fixture
def release():
    # producers may wait on this "forever" -- until the test is over
    event = threading.Event()
    yield event
    event.set()
