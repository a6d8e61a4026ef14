"""
Python implementation of the mulberry32 PRNG.

Jitter values feed straight into the Voronoi sites, so the generator must
reproduce the 32-bit wrap-around arithmetic exactly: the same seed always
yields the same sample points and therefore the same map.
"""

_MASK32 = 0xFFFFFFFF
_INCREMENT = 0x6D2B79F5
_TWO_POW_32 = 4294967296.0


def _uint32(n):
    """Convert to unsigned 32-bit integer."""
    return int(n) & _MASK32


def _imul(a, b):
    """32-bit integer multiplication, keeping the low 32 bits."""
    return (_uint32(a) * _uint32(b)) & _MASK32


class MulberryPRNG:
    """
    mulberry32 generator over a single 32-bit state word.

    Negative seeds are accepted and wrapped to their unsigned 32-bit value.
    """

    def __init__(self, seed):
        """Initialize with an integer seed."""
        # Add call counter
        self.call_count = 0
        self.seed = int(seed)
        self.state = _uint32(self.seed)

    def next_uint32(self):
        """Advance the state and return the next raw 32-bit output word."""
        self.call_count += 1
        self.state = (self.state + _INCREMENT) & _MASK32
        s = self.state

        t = _imul(s ^ (s >> 15), 1 | s)
        t = ((t + _imul(t ^ (t >> 7), 61 | t)) & _MASK32) ^ t
        return (t ^ (t >> 14)) & _MASK32

    def random(self):
        """Generate next random number in [0, 1)."""
        return self.next_uint32() / _TWO_POW_32
