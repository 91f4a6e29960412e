import os
import time

import pytest

from gridgames.navy_morse import (
    BITS_MAX,
    ONE_SIGNAL,
    ZERO_SIGNAL,
    MorseLink,
    decode_bits,
    encode_bits,
)


def _feed(link, value, sender):
    for bit in encode_bits(value):
        link.handle_signal(ONE_SIGNAL if bit else ZERO_SIGNAL, sender)


@pytest.mark.parametrize("value", range(256))
def test_bits_round_trip(value):
    bits = encode_bits(value)
    assert len(bits) == BITS_MAX
    assert decode_bits(bits) == value


def test_encode_least_significant_first():
    assert encode_bits(1) == [1, 0, 0, 0, 0, 0, 0, 0]
    assert encode_bits(255) == [1] * 8
    assert encode_bits(0) == [0] * 8


def test_decode_rejects_wrong_length():
    with pytest.raises(ValueError):
        decode_bits([1, 0, 1])


def test_handle_signal_builds_a_byte():
    link = MorseLink()
    _feed(link, 77, 4242)
    assert link.receive(0.5) == 77
    assert link.last_pid == 4242


def test_other_senders_are_ignored_mid_byte():
    link = MorseLink()
    bits = encode_bits(200)
    for index, bit in enumerate(bits):
        link.handle_signal(ONE_SIGNAL if bit else ZERO_SIGNAL, 100)
        if index < BITS_MAX - 1:
            link.handle_signal(ONE_SIGNAL, 999)
    assert link.receive(0.5) == 200
    assert link.last_pid == 100


def test_receive_times_out_with_zero():
    link = MorseLink()
    start = time.monotonic()
    assert link.receive(0.1) == 0
    assert time.monotonic() - start < 2


def test_receive_resets_after_reading():
    link = MorseLink()
    _feed(link, 255, 7)
    assert link.receive(0.5) == 255
    assert link.receive(0.05) == 0


def test_send_to_own_process():
    with MorseLink(bit_delay=0.01) as link:
        link.send(201, os.getpid())
        assert link.receive(2.0) == 201
        assert link.last_pid == os.getpid()


def test_close_without_open_keeps_state():
    link = MorseLink()
    link.close()
    _feed(link, 3, 11)
    assert link.receive(0.5) == 3