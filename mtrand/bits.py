"""32-bit word helpers shared by the Mersenne Twister generator."""

UINT32_MAX = 0xFFFFFFFF
MATRIX_A = 0x9908B0DF

_UPPER_MASK = 0x80000000
_LOWER_MASK = 0x7FFFFFFF


def to_uint32(x: int) -> int:
    """Clip an integer so that it occupies 32 bits."""
    return x & UINT32_MAX


def hi_bit(u: int) -> int:
    return u & _UPPER_MASK


def lo_bit(u: int) -> int:
    return u & 0x00000001


def lo_bits(u: int) -> int:
    return u & _LOWER_MASK


def mix_bits(u: int, v: int) -> int:
    """High bit of ``u`` joined with the low 31 bits of ``v``."""
    return hi_bit(u) | lo_bits(v)


def twist(m: int, s0: int, s1: int) -> int:
    """One step of the state recurrence.

    ``m`` is the word M positions ahead, ``s0``/``s1`` the current and next
    words. The low bit of ``s1`` is the low bit of the mixed value, so it
    selects whether the matrix constant is folded in.
    """
    mag = MATRIX_A if lo_bit(s1) else 0
    return m ^ (mix_bits(s0, s1) >> 1) ^ mag


def temper(y: int) -> int:
    """Output transform applied to a raw state word."""
    y ^= y >> 11
    y ^= (y << 7) & 0x9D2C5680
    y ^= (y << 15) & 0xEFC60000
    y ^= y >> 18
    return to_uint32(y)


def next_power_of_two(n: int) -> int:
    """Smallest power of two >= n (1 for n <= 1)."""
    if n <= 1:
        return 1
    return 1 << (n - 1).bit_length()
