# verlet_sims/utils/random.py

from __future__ import annotations

from typing import Dict, Hashable
import numpy as np

_master_seed: int | None = None
_rngs: Dict[str, np.random.Generator] = {}


def seed_all(seed: int | None) -> None:
    """
    Set the master seed for every named RNG stream.

    - If seed is None: streams are entropy-seeded (non-reproducible).
    - Resets cached streams, so the next rng(name) call starts fresh.
    """
    global _master_seed, _rngs
    _master_seed = seed
    _rngs.clear()


def rng(name: str = "physics") -> np.random.Generator:
    """
    Return a named RNG stream (order-dependent draws within that stream).
    The simulator takes "physics" for radius draws; colors use "color".
    """
    global _rngs
    if name not in _rngs:
        _rngs[name] = make_rng(name, _master_seed)
    return _rngs[name]


def make_rng(name: str, seed: int | None) -> np.random.Generator:
    """Build an independent generator for (seed, name) without caching it."""
    if seed is None:
        return np.random.default_rng()
    ss = np.random.SeedSequence([seed, _stable_int(name)])
    return np.random.default_rng(ss)


def _stable_int(x: Hashable) -> int:
    """
    Convert arbitrary key -> stable 32-bit integer without relying on Python's hash().
    """
    s = repr(x).encode("utf-8", errors="surrogatepass")
    h = 2166136261
    for b in s:
        h ^= b
        h = (h * 16777619) & 0xFFFFFFFF
    return h
