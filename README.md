# fourierviz

fourierviz streams the samples of a WAV file at playback speed and runs each
chunk through a Fast Fourier Transform. It shows the result live in a pygame
window, in two views:

- on the right, a bar chart of the spectrum with smoothed (eased) bars;
- on the left, a scrolling history of the overall loudness.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running the visualizer

```
fourierviz path/to/audio.wav
```

Options:

- `--chunk-size N`: the number of samples per FFT chunk. It must be a power of
  two. The default is 256.
- `--bars N`: the number of bars in the bar chart. The default is 32.

The window is 1200×600. To close it, press Escape or close the window. While
it runs, the frame rate is printed once a second. If the file cannot be
opened or the options are invalid, the command prints the error and exits
with status 1.

Only 8-bit and 16-bit PCM WAV files can be read. Every sample in the file is
treated as one mono stream, which means interleaved channels are not
separated.

## What it does not do

- It does not capture live input from a microphone. The only audio source is
  a WAV file.
- It does not play the audio. The samples are paced to the file's sample rate
  for display, but you will hear nothing.

## Using the library

### Fourier transforms (`fourierviz.fft`)

```python
from fourierviz.fft import fft, dft, get_frequencies

result = fft([0.0, 1.0, 0.0, -1.0])   # length must be a power of two
print(result.real, result.imag)        # both divided by N

spectrum = get_frequencies(result, 44100)
print(spectrum.frequencies, spectrum.amplitudes)
```

- `fft(data)` is a radix-2 transform of real input. It raises `ValueError`
  when the length is zero or not a power of two.
- `dft(data)` computes the same normalised transform directly, for input of
  any length.
- `get_frequencies(fft_result, sample_rate)` returns a `Frequencies` record.
  The record holds the frequency and amplitude of each bin in the lower half,
  plus `total_samples`, `sample_rate` and `start_time`. `start_time` is set
  to one sample period.

### Streaming a WAV file (`fourierviz.audio`)

```python
from fourierviz.audio import WavFileSource, AudioStreamer

source = WavFileSource("path/to/audio.wav")
print(source.sample_rate(), source.duration(), source.length())

for chunk in source.chunks(256):
    ...  # lists of floats, samples divided by 32767
```

- A `WavFileSource` consumes samples as it reads them. Once chunks have been
  taken, they are gone.
- `AudioStreamer(source, chunk_size)` raises `ValueError` unless
  `chunk_size` is a power of two.
- `AudioStreamer.run(sink)` calls `sink(chunk)` for each chunk, timed to the
  sample rate. If the sink raises `BrokenPipeError`, streaming stops.
- `AudioSource` is the abstract base for other sources.

### Visualizers (`fourierviz.visualizers`)

`BarVisualizer(x, y, width, height, rotation, num_bars)` and
`ScrollingVisualizer(x, y, width, height)` take amplitude lists through
`push(data)`. `rectangles()` returns `(x, y, width, height)` tuples to draw
with any graphics backend. Width or height may be negative for bars that
grow up or to the left.

`Rotation` sets the direction in which bars grow: `UP`, `DOWN`, `LEFT` or
`RIGHT`.

### Other pieces

- `fourierviz.circular.CircularBuffer`: a fixed-capacity ring buffer. When it
  is full, it overwrites its oldest item. Iteration runs from oldest to
  newest, and `reversed()` runs the other way.
- `fourierviz.fps.FpsCounter`: counts frames. Once a second has passed, it
  prints the rate and returns it.
- `fourierviz.app.SpectrumFeed(audio_queue, sample_rate)`: takes sample
  chunks off a `queue.Queue`. A `None` on the queue marks the end of the
  stream. `poll()` returns the spectrum of the newest chunk, or `None`.
- `fourierviz.app.create_visualizers(width, height, num_bars)`: builds the
  two views in the window's layout.