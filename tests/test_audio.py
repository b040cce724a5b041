import time
import wave

import pytest

from fourierviz.audio import AudioStreamer, WavFileSource


def _write_wav(path, samples, rate=8000, channels=1, width=2):
    with wave.open(str(path), "wb") as writer:
        writer.setnchannels(channels)
        writer.setsampwidth(width)
        writer.setframerate(rate)
        if width == 2:
            data = b"".join(s.to_bytes(2, "little", signed=True) for s in samples)
        else:
            data = bytes(samples)
        writer.writeframes(data)
    return path


def test_metadata(tmp_path):
    path = _write_wav(tmp_path / "a.wav", [0] * 800, rate=8000)
    source = WavFileSource(path)
    assert source.sample_rate() == 8000
    assert source.length() == 800
    assert source.duration() == pytest.approx(800 / 8000)


def test_stereo_length_counts_all_samples(tmp_path):
    path = _write_wav(tmp_path / "s.wav", [1, 2, 3, 4, 5, 6], rate=8000, channels=2)
    source = WavFileSource(path)
    assert source.length() == 6


def test_chunks_scale_to_unit_range(tmp_path):
    path = _write_wav(tmp_path / "b.wav", [32767, -32767, 0])
    source = WavFileSource(path)
    chunks = list(source.chunks(4))
    assert chunks == [[1.0, -1.0, 0.0]]


def test_chunk_sizes_and_exhaustion(tmp_path):
    path = _write_wav(tmp_path / "c.wav", list(range(10)))
    source = WavFileSource(path)
    chunks = list(source.chunks(4))
    assert [len(c) for c in chunks] == [4, 4, 2]
    assert list(source.chunks(4)) == []


def test_chunks_rejects_nonpositive_size(tmp_path):
    path = _write_wav(tmp_path / "d.wav", [0, 0])
    source = WavFileSource(path)
    with pytest.raises(ValueError):
        list(source.chunks(0))


def test_eight_bit_silence(tmp_path):
    path = _write_wav(tmp_path / "e.wav", [128, 128, 128], width=1)
    source = WavFileSource(path)
    assert list(source.chunks(8)) == [[0.0, 0.0, 0.0]]


def test_unsupported_width(tmp_path):
    path = tmp_path / "f.wav"
    with wave.open(str(path), "wb") as writer:
        writer.setnchannels(1)
        writer.setsampwidth(3)
        writer.setframerate(8000)
        writer.writeframes(b"\x00" * 9)
    with pytest.raises(ValueError):
        WavFileSource(path)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        WavFileSource(tmp_path / "missing.wav")


def test_not_a_wav(tmp_path):
    path = tmp_path / "junk.wav"
    path.write_bytes(b"this is not audio data at all")
    with pytest.raises(ValueError):
        WavFileSource(path)


def test_streaming_matches_chunks(tmp_path):
    samples = [i * 100 - 5000 for i in range(100)]
    path = _write_wav(tmp_path / "g.wav", samples, rate=44100)
    expected = list(WavFileSource(path).chunks(16))
    received = []
    WavFileSource(path).start_streaming(received.append, 16)
    assert received == expected


def test_streaming_is_paced(tmp_path):
    path = _write_wav(tmp_path / "h.wav", [0] * 800, rate=8000)
    source = WavFileSource(path)
    received = []
    started = time.monotonic()
    source.start_streaming(received.append, 64)
    elapsed = time.monotonic() - started
    assert sum(len(c) for c in received) == 800
    assert elapsed >= 0.05


def test_streaming_stops_when_sink_closed(tmp_path):
    path = _write_wav(tmp_path / "i.wav", [0] * 64, rate=44100)
    source = WavFileSource(path)
    calls = []

    def sink(chunk):
        calls.append(chunk)
        if len(calls) > 1:
            raise BrokenPipeError

    result = source.start_streaming(sink, 8)
    assert result is None
    assert calls == [[0.0] * 8, [0.0] * 8]
    remaining = list(source.chunks(8))
    assert sum(len(c) for c in remaining) == 48


@pytest.mark.parametrize("size", [0, 3, 6, 100])
def test_streamer_rejects_non_power_of_two(tmp_path, size):
    path = _write_wav(tmp_path / "j.wav", [0] * 4)
    with pytest.raises(ValueError):
        AudioStreamer(WavFileSource(path), size)


def test_streamer_run(tmp_path):
    path = _write_wav(tmp_path / "k.wav", list(range(20)), rate=44100)
    streamer = AudioStreamer(WavFileSource(path), 8)
    assert streamer.sample_rate == 44100
    received = []
    streamer.run(received.append)
    assert [len(c) for c in received] == [8, 8, 4]