"""Audio sources that deliver mono sample chunks at playback speed."""

from __future__ import annotations

import itertools
import sys
import time
import wave
from abc import ABC, abstractmethod
from array import array
from collections.abc import Callable, Iterator

Sink = Callable[[list[float]], object]

_I16_MAX = 32767


class AudioSource(ABC):
    """A stream of samples that can be pushed to a sink in fixed-size chunks.

    A sink is any callable taking a list of floats. A sink raises
    BrokenPipeError when nobody is listening any more; the source then stops.
    """

    @abstractmethod
    def sample_rate(self) -> int:
        """Samples per second."""

    @abstractmethod
    def duration(self) -> float:
        """Length of the stream in seconds."""

    @abstractmethod
    def length(self) -> int:
        """Total number of samples in the stream."""

    @abstractmethod
    def start_streaming(self, sink: Sink, chunk_size: int) -> None:
        """Send chunks of at most ``chunk_size`` samples to ``sink``."""


def _decode(raw: bytes, sample_width: int) -> array:
    if sample_width == 2:
        samples = array("h")
        samples.frombytes(raw)
        if sys.byteorder == "big":
            samples.byteswap()
        return samples
    # 8-bit WAV data is unsigned with 128 as silence.
    return array("h", (byte - 128 for byte in raw))


class WavFileSource(AudioSource):
    """Reads 8- or 16-bit PCM samples from a WAV file.

    Samples are consumed as they are read: once streamed, they are gone.
    """

    def __init__(self, path: str) -> None:
        try:
            with wave.open(str(path), "rb") as reader:
                sample_width = reader.getsampwidth()
                if sample_width not in (1, 2):
                    raise ValueError(
                        f"Unsupported sample width: {sample_width * 8} bits"
                    )
                self._sample_rate = reader.getframerate()
                raw = reader.readframes(reader.getnframes())
        except (wave.Error, EOFError) as exc:
            raise ValueError(f"Not a readable WAV file: {exc}") from exc
        self._samples = _decode(raw, sample_width)
        self._length = len(self._samples)
        self._duration = self._length / self._sample_rate
        self._position = 0

    def sample_rate(self) -> int:
        return self._sample_rate

    def duration(self) -> float:
        return self._duration

    def length(self) -> int:
        return self._length

    def _remaining(self) -> Iterator[int]:
        while self._position < self._length:
            sample = self._samples[self._position]
            self._position += 1
            yield sample

    def chunks(self, chunk_size: int) -> Iterator[list[float]]:
        """Yield the unread samples scaled to [-1, 1], ``chunk_size`` at a time."""
        if chunk_size <= 0:
            raise ValueError("Chunk size must be greater than 0.")
        remaining = self._remaining()
        while True:
            chunk = [s / _I16_MAX for s in itertools.islice(remaining, chunk_size)]
            if not chunk:
                return
            yield chunk

    def start_streaming(self, sink: Sink, chunk_size: int) -> None:
        """Send chunks to ``sink`` paced to the file's sample rate."""
        next_chunk_time = time.monotonic()
        for chunk in self.chunks(chunk_size):
            try:
                sink(chunk)
            except BrokenPipeError:
                print("WAV stream: Receiver dropped. Stopping.", file=sys.stderr)
                return
            next_chunk_time += len(chunk) / self._sample_rate
            delay = next_chunk_time - time.monotonic()
            if delay > 0:
                time.sleep(delay)


class AudioStreamer:
    """Runs a source with a power-of-two chunk size."""

    def __init__(self, source: AudioSource, chunk_size: int) -> None:
        if chunk_size <= 0 or chunk_size & (chunk_size - 1):
            raise ValueError("Chunk size must be a power of 2.")
        self.source = source
        self.sample_rate = source.sample_rate()
        self.chunk_size = chunk_size
        self.channels = 1

    def run(self, sink: Sink) -> None:
        """Stream the whole source into ``sink``."""
        print("AudioStreamer: Starting source streaming...")
        self.source.start_streaming(sink, self.chunk_size)
        print("AudioStreamer: Source streaming finished.")