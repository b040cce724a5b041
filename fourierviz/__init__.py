"""Audio spectrum analysis: FFT/DFT, WAV streaming and live visualizers."""

__version__ = "0.1.0"
__all__ = ["fft", "circular", "fps", "audio", "visualizers", "app"]