"""Send bytes between processes one bit at a time using two user signals."""

from __future__ import annotations

import os
import signal
import threading
import time

BITS_MAX = 8
TIMEOUT = 1.0
BIT_WAIT = 0.01
ZERO_SIGNAL = signal.SIGUSR1
ONE_SIGNAL = signal.SIGUSR2
_SIGNALS = {ZERO_SIGNAL, ONE_SIGNAL}
_POLL = 0.05


def encode_bits(value: int) -> list[int]:
    """Return the low ``BITS_MAX`` bits of ``value``, least significant first."""
    return [(value >> shift) & 1 for shift in range(BITS_MAX)]


def decode_bits(bits: list[int]) -> int:
    """Rebuild a value from bits given least significant first."""
    if len(bits) != BITS_MAX:
        raise ValueError(f"expected {BITS_MAX} bits, got {len(bits)}")
    return sum(bit << shift for shift, bit in enumerate(bits))


class MorseLink:
    """A signal-based link that receives bytes from one sender at a time."""

    def __init__(self, bit_delay: float = BIT_WAIT) -> None:
        self.bit_delay = bit_delay
        self.last_pid = -1
        self._bits: list[int] = []
        self._from_pid = 0
        self._byte = 0
        self._received = False
        self._condition = threading.Condition()
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None
        self._old_mask: set[int] | None = None

    def open(self) -> MorseLink:
        """Start listening for incoming bits."""
        if self._thread is not None:
            return self
        self._old_mask = signal.pthread_sigmask(signal.SIG_BLOCK, _SIGNALS)
        self._stop.clear()
        self._thread = threading.Thread(target=self._listen, daemon=True)
        self._thread.start()
        return self

    def close(self) -> None:
        """Stop listening and restore the previous signal mask."""
        if self._thread is None:
            return
        self._stop.set()
        self._thread.join()
        self._thread = None
        while signal.sigtimedwait(_SIGNALS, 0) is not None:
            pass
        if self._old_mask is not None:
            signal.pthread_sigmask(signal.SIG_SETMASK, self._old_mask)
            self._old_mask = None

    def __enter__(self) -> MorseLink:
        return self.open()

    def __exit__(self, *args) -> None:
        self.close()

    def _listen(self) -> None:
        while not self._stop.is_set():
            info = signal.sigtimedwait(_SIGNALS, _POLL)
            if info is not None:
                self.handle_signal(info.si_signo, info.si_pid)

    def handle_signal(self, signum: int, sender: int) -> None:
        """Take in one bit sent as ``signum`` by process ``sender``."""
        with self._condition:
            if not self._from_pid:
                self._from_pid = sender
            if self._from_pid == sender:
                self._bits.append(0 if signum == ZERO_SIGNAL else 1)
            if len(self._bits) >= BITS_MAX:
                self._byte = decode_bits(self._bits)
                self._bits.clear()
                self._received = True
                self.last_pid = self._from_pid
                self._from_pid = 0
                self._condition.notify_all()

    def send(self, value: int, pid: int) -> None:
        """Send the low bits of ``value`` to process ``pid``.

        Raises OSError when the process cannot be signalled.
        """
        os.kill(pid, 0)
        for bit in encode_bits(value):
            os.kill(pid, ONE_SIGNAL if bit else ZERO_SIGNAL)
            time.sleep(self.bit_delay)

    def receive(self, timeout: float | None = 0) -> int:
        """Wait for a whole byte and return it; 0 when ``timeout`` expires.

        A timeout of 0 or None waits for ever.
        """
        with self._condition:
            self._condition.wait_for(lambda: self._received, timeout=timeout or None)
            self._received = False
            value, self._byte = self._byte, 0
            return value