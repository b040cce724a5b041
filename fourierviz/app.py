"""Live spectrum window fed by an audio file streamed at playback speed."""

from __future__ import annotations

import argparse
import queue
import sys
import threading
from collections.abc import Sequence

from fourierviz.audio import AudioStreamer, WavFileSource
from fourierviz.fft import Frequencies, fft, get_frequencies
from fourierviz.fps import FpsCounter
from fourierviz.visualizers import (
    BarVisualizer,
    Rotation,
    ScrollingVisualizer,
    Visualizer,
)

WINDOW_WIDTH = 1200
WINDOW_HEIGHT = 600
CHUNK_SIZE = 256
NUM_BARS = 32
WINDOW_TITLE = "FFT - Audio File"

_WHITE = (255, 255, 255)
_BLACK = (0, 0, 0)


class SpectrumFeed:
    """Turns sample chunks arriving on a queue into frequency frames.

    The producer puts lists of samples on the queue and ``None`` once it
    has finished.
    """

    def __init__(self, audio_queue: queue.Queue, sample_rate: int) -> None:
        self._queue = audio_queue
        self.sample_rate = sample_rate
        self.ended = False
        self._processed_any = False

    def poll(self) -> Frequencies | None:
        """Drain pending chunks and return the newest spectrum, or None."""
        latest: Frequencies | None = None
        if self.ended:
            return None
        while True:
            try:
                chunk = self._queue.get_nowait()
            except queue.Empty:
                break
            if chunk is None:
                self.ended = True
                print("Audio stream ended (sender disconnected).")
                if not self._processed_any and latest is None:
                    print("Warning: No FFT data was processed from the audio stream.")
                break
            latest = get_frequencies(fft([float(v) for v in chunk]), self.sample_rate)
            self._processed_any = True
        return latest


def create_visualizers(width: int, height: int, num_bars: int) -> list[Visualizer]:
    """Bars on the right half of the window, loudness history on the left."""
    half = width // 2
    return [
        BarVisualizer(
            half + 10.0,
            10.0,
            half - 20.0,
            height - 20.0,
            Rotation.UP,
            num_bars,
        ),
        ScrollingVisualizer(10.0, 10.0, half - 20.0, height - 20.0),
    ]


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="fourierviz", description="Show the live spectrum of a WAV file."
    )
    parser.add_argument("path", help="WAV file to visualise")
    parser.add_argument("--chunk-size", type=int, default=CHUNK_SIZE)
    parser.add_argument("--bars", type=int, default=NUM_BARS)
    return parser.parse_args(argv)


def _start_streaming(
    streamer: AudioStreamer, audio_queue: queue.Queue, stop: threading.Event
) -> threading.Thread:
    def sink(chunk: list[float]) -> None:
        if stop.is_set():
            raise BrokenPipeError("receiver closed")
        audio_queue.put(chunk)

    def worker() -> None:
        print("Audio streaming thread started (WavFileSource).")
        try:
            streamer.run(sink)
        except Exception as exc:  # noqa: BLE001 - reported, thread ends
            print(f"Error running audio streamer: {exc}", file=sys.stderr)
        finally:
            audio_queue.put(None)
        print("Audio streaming thread finished.")

    thread = threading.Thread(target=worker, daemon=True)
    thread.start()
    return thread


def _run_window(feed: SpectrumFeed, visualizers: list[Visualizer]) -> None:
    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        clock = pygame.time.Clock()
        fps_counter = FpsCounter()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False

            frame = feed.poll()
            screen.fill(_WHITE)
            if frame is not None:
                if not frame.frequencies:
                    raise ValueError("Spectrum frame holds no frequencies.")
                for visualizer in visualizers:
                    visualizer.push(frame.amplitudes)
                for visualizer in visualizers:
                    for x, y, w, h in visualizer.rectangles():
                        rect = pygame.Rect(int(x), int(y), int(w), int(h))
                        rect.normalize()
                        pygame.draw.rect(screen, _BLACK, rect)
            pygame.display.flip()
            fps_counter.execute()
            clock.tick(60)
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Open the window and visualise the given WAV file until it is closed."""
    args = _parse_args(argv)
    try:
        source = WavFileSource(args.path)
        streamer = AudioStreamer(source, args.chunk_size)
        visualizers = create_visualizers(WINDOW_WIDTH, WINDOW_HEIGHT, args.bars)
    except (OSError, ValueError) as exc:
        print(f"fourierviz: {exc}", file=sys.stderr)
        return 1

    audio_queue: queue.Queue = queue.Queue()
    stop = threading.Event()
    feed = SpectrumFeed(audio_queue, streamer.sample_rate)
    thread = _start_streaming(streamer, audio_queue, stop)
    try:
        _run_window(feed, visualizers)
    finally:
        stop.set()
        thread.join(timeout=5.0)
        if thread.is_alive():
            print("Error joining audio thread.", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())