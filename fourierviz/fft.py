"""Discrete and fast Fourier transforms with normalised output."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field


@dataclass
class FftResult:
    """Real and imaginary components of a transform, each divided by N."""

    real: list[float] = field(default_factory=list)
    imag: list[float] = field(default_factory=list)


@dataclass
class Frequencies:
    """Frequency bins and their amplitudes for one window of samples."""

    frequencies: list[float]
    amplitudes: list[float]
    total_samples: int
    sample_rate: int
    start_time: float


def _bit_reverse(n: int, num_bits: int) -> int:
    reversed_bits = 0
    for bit in range(num_bits):
        if (n >> bit) & 1:
            reversed_bits |= 1 << (num_bits - 1 - bit)
    return reversed_bits


def fft(data: Sequence[float]) -> FftResult:
    """Radix-2 FFT of real input; the length must be a power of two.

    Raises ValueError when the length is zero or not a power of two.
    """
    n = len(data)
    if n == 0 or n & (n - 1):
        raise ValueError("Input length must be a power of 2 and greater than 0.")

    num_bits = n.bit_length() - 1
    real = [0.0] * n
    imag = [0.0] * n
    for index, value in enumerate(data):
        real[_bit_reverse(index, num_bits)] = float(value)

    step = 2
    while step <= n:
        half = step // 2
        twiddles = [
            (math.cos(-2.0 * math.pi * j / step), math.sin(-2.0 * math.pi * j / step))
            for j in range(half)
        ]
        for start in range(0, n, step):
            for j, (tw_real, tw_imag) in enumerate(twiddles):
                top = start + j
                bottom = top + half
                b_real, b_imag = real[bottom], imag[bottom]
                temp_real = tw_real * b_real - tw_imag * b_imag
                temp_imag = tw_real * b_imag + tw_imag * b_real
                a_real, a_imag = real[top], imag[top]
                real[top] = a_real + temp_real
                imag[top] = a_imag + temp_imag
                real[bottom] = a_real - temp_real
                imag[bottom] = a_imag - temp_imag
        step *= 2

    return FftResult(real=[r / n for r in real], imag=[i / n for i in imag])


def dft(data: Sequence[float]) -> FftResult:
    """Direct O(N^2) discrete Fourier transform of real input, divided by N."""
    n = len(data)
    real: list[float] = []
    imag: list[float] = []
    for k in range(n):
        sum_real = 0.0
        sum_imag = 0.0
        for t, value in enumerate(data):
            angle = -2.0 * math.pi * k * t / n
            sum_real += value * math.cos(angle)
            sum_imag += value * math.sin(angle)
        real.append(sum_real / n)
        imag.append(sum_imag / n)
    return FftResult(real=real, imag=imag)


def get_frequencies(fft_result: FftResult, sample_rate: int) -> Frequencies:
    """Map the lower half of a transform onto frequencies and amplitudes.

    The start time is set to one sample period; callers that know the real
    start of the window should overwrite it.
    """
    n = len(fft_result.real)
    half = n // 2
    frequencies = [i * sample_rate / n for i in range(half)]
    amplitudes = [
        math.hypot(re, im)
        for re, im in zip(fft_result.real[:half], fft_result.imag[:half])
    ]
    if n > 0:
        start_time = 1.0 / sample_rate
        total_samples = n
    else:
        start_time = 0.0
        total_samples = 0
    return Frequencies(
        frequencies=frequencies,
        amplitudes=amplitudes,
        total_samples=total_samples,
        sample_rate=sample_rate,
        start_time=start_time,
    )