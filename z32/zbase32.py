"""z-base32 encoding.

z-base32 is a human-oriented base32 variant described by Zooko
O'Whielacronx. Two differences from RFC 4648:

1. Alphabet: "ybndrfg8ejkmcpqxot1uwisza345h769" — 32 chars ordered so
   the most frequent symbols are the easiest to read, write and speak.
   Visually ambiguous characters (0, l, v, 2) are left out.

2. Bit precision: the length of the input is given in *bits*, not
   bytes. A 20-bit value encodes to 4 characters instead of being padded
   up to a whole byte first. There is no "=" padding.

5-bit groups are taken left-to-right, MSB first within each byte.

Output length: ceil(bits/5) characters.
  1 bit     → 1 char
  8 bits    → 2 chars
  160 bits  → 32 chars

See: https://philzimmermann.com/docs/human-oriented-base-32-encoding.txt
"""

ALPHABET = "ybndrfg8ejkmcpqxot1uwisza345h769"


class InsufficientInputError(ValueError):
    """More bits were requested than the input buffer holds.

    This is a caller bug, not a data error.
    """


def encode(data: bytes, bits: int) -> str:
    """Encode the first `bits` bits of `data` with z-base32.

    At each bit position p (stepping by 5), the group starts at byte
    p//8, bit p%8. If the offset is 3 or less the whole group sits inside
    that byte. Otherwise it spills into the next byte: the remaining low
    bits of byte i become the high part of the group, and the top bits of
    byte i+1 fill in the rest. Past the last byte those bits read as zero.

    Raises InsufficientInputError if bits exceeds len(data) * 8.
    """
    available = len(data) * 8
    if bits < 0 or bits > available:
        raise InsufficientInputError(
            f"cannot encode {bits} bits from {len(data)} bytes ({available} bits available)"
        )
    last = len(data) - 1
    result = []
    for p in range(0, bits, 5):
        i = p >> 3    # which input byte
        j = p & 7     # bit offset within that byte
        if j <= 3:
            c = data[i] >> (3 - j)
        else:
            overflow = j - 3
            c = data[i] << overflow
            if i < last:
                c |= data[i + 1] >> (8 - overflow)  # top bits of the next byte
        result.append(ALPHABET[c & 0x1F])
    return "".join(result)


def encode_full_bytes(data: bytes) -> str:
    """Encode every byte of `data`. Same as encode(data, len(data) * 8)."""
    return encode(data, len(data) * 8)
