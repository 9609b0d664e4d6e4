# Copyright (c) 2014-2015  Sam Maloney.
# License: GPL v2.

# Lowercase letters minus i, l, o and u; keeps the output readable aloud and
# safe to case fold.
DIGITS = "0123456789abcdefghjkmnpqrstvwxyz"

SEPARATOR = "-"

SYMBOL_BITS = 5
GROUP_SIZE = 4 # symbols between separators.
BLOCK_BYTES = 5
BLOCK_SYMBOLS = 8 # BLOCK_BYTES * 8 / SYMBOL_BITS.
MAX_PADDING = BLOCK_BYTES - 1

DIGIT_VALUES = {c: i for i, c in enumerate(DIGITS)}

def _zero_run(padding):
    # Symbols made up entirely of padding bits.
    return (padding * 8) // SYMBOL_BITS

def _boundary_symbols(padding):
    # The symbol just before the zero run carries the remaining padding bits
    # in its low end, so only values with those bits clear are possible.
    mask = (1 << ((padding * 8) % SYMBOL_BITS)) - 1
    return frozenset(DIGITS[v] for v in range(len(DIGITS)) if not v & mask)

PADDING_ZERO_RUN = {p: _zero_run(p) for p in range(1, MAX_PADDING + 1)}
PADDING_BOUNDARY = {p: _boundary_symbols(p) for p in range(1, MAX_PADDING + 1)}

assert len(DIGIT_VALUES) == 32, len(DIGIT_VALUES)
