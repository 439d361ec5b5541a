"""Seeded 3D Perlin noise with optional wrapping, plus fractal variants.

Implements the revised (2002) gradient noise. Adjacent values are continuous.
Values at integer lattice points are always zero. The noise repeats every 256
units on each axis, or at a smaller power-of-two period when one is given.
"""

from __future__ import annotations

import math

__all__ = [
    "noise3",
    "ridge_noise3",
    "fbm_noise3",
    "turbulence_noise3",
    "noise3_wrap_nonpow2",
]

# A fixed permutation of 0..255, one byte per slot.
_PERMUTATION = tuple(
    bytes.fromhex(
        "177da134677546 25f765cba97c7e2c7b"
        "98ee912dab72fd0ac088049df91e2348"
        "af3f4d5ab510606f85684ba25d3842f0"
        "083254e531d2adef8d01571202c68f39"
        "e1a03ad9a8cef5ccc706493c14e6d3e9"
        "5ec858094a9b210fdb82e2ca53ec2aac"
        "a5da37de2e6b629a6d43c4b27f9e0df3"
        "414fa6f819e0735044 33b880e8d0977a"
        "1ad4692bb3d5eb9492590ec31c4e704c"
        "fa2f18fb8c6cbabee4aab78b27bcf4f6"
        "84307790b48a86c152b6787956dcd103"
        "5bf19555cd9671d81f6429a4b1d699e7"
        "2647b9ae61c91d5f075c36febf7622dd"
        "830ba363ea51e3939cb0118e450c6e3e"
        "1bff00c23b74f2fc1315bb35cf814087"
        "3d28a7ed66df6a9fc5bdd78924201605"
    )
)

# Gradient index (0..11) for each permutation slot, one hex digit per slot;
# chosen so that the twelve gradients are used with nearly equal frequency.
_GRADIENT_INDEX = tuple(
    int(digit, 16)
    for digit in (
        "7950b16939b18a47"
        "86153a9a08415278"
        "7b9a104750b61428"
        "8a499257917226b5"
        "5469011076984a31"
        "2889ab5bb26a3424"
        "9a32636a534ab29b"
        "1ba494b04b400076"
        "a413b53429130180"
        "6787046a823bb802"
        "48300a6122456013"
        "b95596983818969b"
        "a7565913702ab261"
        "3b7721730811506a"
        "bb0270a83571b107"
        "90b5a32359798465"
    )
)

# Doubled so that a sum of two byte-sized indices never needs masking.
_RANDTAB = _PERMUTATION * 2
_GRAD_IDX = _GRADIENT_INDEX * 2

# The twelve edge-midpoint directions of a cube.
_BASIS = tuple(
    (sx * a, sy * b, c * sz)
    for a, b, c in ((1, 1, 0), (1, 0, 1), (0, 1, 1))
    for sy, sz in ((1, 1), (-1, -1))
    for sx in (1, -1)
    if True
)
_BASIS = (
    (1, 1, 0), (-1, 1, 0), (1, -1, 0), (-1, -1, 0),
    (1, 0, 1), (-1, 0, 1), (1, 0, -1), (-1, 0, -1),
    (0, 1, 1), (0, -1, 1), (0, 1, -1), (0, -1, -1),
)


def _lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def _ease(a: float) -> float:
    return ((a * 6 - 15) * a + 10) * a * a * a


def _grad(index: int, x: float, y: float, z: float) -> float:
    gx, gy, gz = _BASIS[index]
    return gx * x + gy * y + gz * z


def _blend(
    fx: float,
    fy: float,
    fz: float,
    r0: int,
    r1: int,
    y0: int,
    y1: int,
    z0: int,
    z1: int,
) -> float:
    """Interpolate the eight corner gradients of one lattice cell."""
    u, v, w = _ease(fx), _ease(fy), _ease(fz)

    r00 = _RANDTAB[r0 + y0]
    r01 = _RANDTAB[r0 + y1]
    r10 = _RANDTAB[r1 + y0]
    r11 = _RANDTAB[r1 + y1]

    def corner(r: int, zc: int, dx: int, dy: int, dz: int) -> float:
        return _grad(_GRAD_IDX[r + zc], fx - dx, fy - dy, fz - dz)

    n00 = _lerp(corner(r00, z0, 0, 0, 0), corner(r00, z1, 0, 0, 1), w)
    n01 = _lerp(corner(r01, z0, 0, 1, 0), corner(r01, z1, 0, 1, 1), w)
    n10 = _lerp(corner(r10, z0, 1, 0, 0), corner(r10, z1, 1, 0, 1), w)
    n11 = _lerp(corner(r11, z0, 1, 1, 0), corner(r11, z1, 1, 1, 1), w)

    return _lerp(_lerp(n00, n01, v), _lerp(n10, n11, v), u)


def noise3(
    x: float,
    y: float,
    z: float,
    x_wrap: int = 0,
    y_wrap: int = 0,
    z_wrap: int = 0,
    seed: int = 0,
) -> float:
    """Return gradient noise at (x, y, z).

    Wrap values must be powers of two, or 0 for the default period of 256.
    Only the lowest 8 bits of ``seed`` are used.
    """
    seed &= 255
    x_mask = (x_wrap - 1) & 255
    y_mask = (y_wrap - 1) & 255
    z_mask = (z_wrap - 1) & 255
    px, py, pz = math.floor(x), math.floor(y), math.floor(z)

    r0 = _RANDTAB[(px & x_mask) + seed]
    r1 = _RANDTAB[((px + 1) & x_mask) + seed]
    return _blend(
        x - px,
        y - py,
        z - pz,
        r0,
        r1,
        py & y_mask,
        (py + 1) & y_mask,
        pz & z_mask,
        (pz + 1) & z_mask,
    )


def _octaves(x: float, y: float, z: float, lacunarity: float, octaves: int):
    """Yield (octave, noise) pairs at successively scaled frequencies."""
    frequency = 1.0
    for octave in range(octaves):
        yield octave, noise3(
            x * frequency, y * frequency, z * frequency, 0, 0, 0, octave
        )
        frequency *= lacunarity


def ridge_noise3(
    x: float,
    y: float,
    z: float,
    lacunarity: float,
    gain: float,
    offset: float,
    octaves: int,
) -> float:
    """Return ridged multifractal noise summed over ``octaves`` octaves."""
    prev = 1.0
    amplitude = 0.5
    total = 0.0
    for _, value in _octaves(x, y, z, lacunarity, octaves):
        r = (offset - abs(value)) ** 2
        total += r * amplitude * prev
        prev = r
        amplitude *= gain
    return total


def fbm_noise3(
    x: float,
    y: float,
    z: float,
    lacunarity: float,
    gain: float,
    octaves: int,
) -> float:
    """Return fractal Brownian motion noise summed over ``octaves`` octaves."""
    amplitude = 1.0
    total = 0.0
    for _, value in _octaves(x, y, z, lacunarity, octaves):
        total += value * amplitude
        amplitude *= gain
    return total


def turbulence_noise3(
    x: float,
    y: float,
    z: float,
    lacunarity: float,
    gain: float,
    octaves: int,
) -> float:
    """Return turbulence noise: the sum of absolute octave values."""
    amplitude = 1.0
    total = 0.0
    for _, value in _octaves(x, y, z, lacunarity, octaves):
        total += abs(value * amplitude)
        amplitude *= gain
    return total


def noise3_wrap_nonpow2(
    x: float,
    y: float,
    z: float,
    x_wrap: int = 0,
    y_wrap: int = 0,
    z_wrap: int = 0,
    seed: int = 0,
) -> float:
    """Return gradient noise that wraps at any integer period (0 means 256)."""
    seed &= 255
    px, py, pz = math.floor(x), math.floor(y), math.floor(z)
    x_period = x_wrap or 256
    y_period = y_wrap or 256
    z_period = z_wrap or 256

    x0, y0, z0 = px % x_period, py % y_period, pz % z_period

    r0 = _RANDTAB[_RANDTAB[x0] + seed]
    r1 = _RANDTAB[_RANDTAB[(x0 + 1) % x_period] + seed]
    return _blend(
        x - px,
        y - py,
        z - pz,
        r0,
        r1,
        y0,
        (y0 + 1) % y_period,
        z0,
        (z0 + 1) % z_period,
    )