# Copyright (c) 2014-2015  Sam Maloney.
# License: GPL v2.

"""bfh: binary for humans.

Encodes binary data as 5 bit symbols from a 32 character alphabet, grouped
four at a time with dashes, eg: b"\\xa7\\x0d" -> "3-mw6g-0000".

The leading symbol is the count of zero bytes that were appended to make
the input a multiple of 5 bytes long; 5 bytes are exactly 8 symbols. The
strict variants skip that and require the input to already be a multiple of
5 bytes.
"""

import llog

import logging

import consts
from bfhcheck import is_acceptable, is_well_formatted, is_strict,\
    strip_separators

log = logging.getLogger(__name__)

class BfhError(Exception):
    pass

class NilInputError(BfhError, TypeError):
    def __init__(self):
        super().__init__("Binary data must not be None.")

class LengthNotMultipleOf5Error(BfhError, ValueError):
    def __init__(self, length):
        super().__init__(\
            "Length of binary data [{}] must be a multiple of 5 for strict"\
            " encoding.".format(length))
        self.length = length

class LengthNotMultipleOf8Error(BfhError, ValueError):
    def __init__(self, length):
        super().__init__(\
            "Length of encoded string [{}] must be a multiple of 8 for"\
            " decoding.".format(length))
        self.length = length

class PaddingOutOfRangeError(BfhError, ValueError):
    """Raised when the first symbol of a string to decode is not one of
    0, 1, 2, 3 or 4, including when there is no first symbol at all."""

    def __init__(self, char):
        super().__init__(\
            "Non empty string must start with 0, 1, 2, 3 or 4, got [{}]."\
                .format(char))
        self.char = char

class PaddingMismatchError(BfhError, ValueError):
    """Raised when the bytes the padding symbol says were appended are
    missing or not zero."""

    def __init__(self, padding):
        super().__init__(\
            "Encoded data does not end in [{}] zero padding bytes."\
                .format(padding))
        self.padding = padding

class InvalidCharacterError(BfhError, ValueError):
    def __init__(self, char):
        super().__init__(\
            "String contains invalid character: [{}].".format(char))
        self.char = char

class StrictFormatInvalidError(BfhError, ValueError):
    def __init__(self):
        super().__init__("Invalid encoded string for strict mode.")

def symbol_of(value):
    if not 0 <= value < len(consts.DIGITS):
        raise ValueError("Symbol value [{}] is out of range.".format(value))

    return consts.DIGITS[value]

def value_of(char):
    value = consts.DIGIT_VALUES.get(char)
    if value is None:
        raise InvalidCharacterError(char)

    return value

def padding_for(length):
    "Returns how many zero bytes make length a multiple of 5."
    return (consts.BLOCK_BYTES - length % consts.BLOCK_BYTES)\
        % consts.BLOCK_BYTES

def pad_bytes(data):
    """Returns (padding, data) where data has padding zero bytes appended.

    The passed in buffer is never modified; when no padding is needed it is
    returned as is."""

    padding = padding_for(len(data))

    if padding:
        data = data + bytes(padding)

    return padding, data

def pack(data):
    """Packs data, whose length must be a multiple of 5, into symbols with a
    separator after every GROUP_SIZE symbols except the last."""

    assert len(data) % consts.BLOCK_BYTES == 0, len(data)

    total = len(data) * 8 // consts.SYMBOL_BITS

    result = []
    count = 0

    r = 0
    rbits = 0

    for char in data:
        r = (r << 8) | char
        rbits += 8

        while rbits >= consts.SYMBOL_BITS:
            rbits -= consts.SYMBOL_BITS
            result.append(consts.DIGITS[r >> rbits])
            r &= (1 << rbits) - 1

            count += 1
            if count % consts.GROUP_SIZE == 0 and count < total:
                result.append(consts.SEPARATOR)

    return "".join(result)

def unpack(val):
    """Unpacks the separator free symbol string val, whose length must be a
    multiple of 8, into a new bytearray."""

    assert len(val) % consts.BLOCK_SYMBOLS == 0, len(val)

    data = bytearray(len(val) * consts.SYMBOL_BITS // 8)

    bit = 0
    for char in val:
        value = value_of(char)

        i = bit >> 3
        offset = bit & 0x7

        if offset <= 8 - consts.SYMBOL_BITS:
            data[i] |= value << (8 - consts.SYMBOL_BITS - offset)
        else:
            # Straddles two bytes; the low spill bits go to the top of the
            # next one.
            spill = offset + consts.SYMBOL_BITS - 8
            data[i] |= value >> spill
            data[i + 1] |= (value & ((1 << spill) - 1)) << (8 - spill)

        bit += consts.SYMBOL_BITS

    return data

def _check_data(data):
    if data is None:
        raise NilInputError()

    if type(data) not in (bytes, bytearray, memoryview):
        raise TypeError(\
            "Expected bytes, bytearray or memoryview, got [{}]."\
                .format(type(data).__name__))

    return bytes(data)

def _check_str(val):
    if type(val) is not str:
        raise TypeError("Expected str, got [{}].".format(type(val).__name__))

def encode(data):
    "Encodes binary data into a human readable string."

    data = _check_data(data)

    # Historically empty input encodes to nothing rather than "0-".
    if not data:
        return ""

    padding, data = pad_bytes(data)

    if log.isEnabledFor(logging.DEBUG):
        log.debug("Encoding [{}] bytes with padding [{}]."\
            .format(len(data), padding))

    return symbol_of(padding) + consts.SEPARATOR + pack(data)

def encode_strict(data):
    """Encodes binary data whose length is a multiple of 5 into a string
    without the leading padding symbol."""

    data = _check_data(data)

    if len(data) % consts.BLOCK_BYTES:
        raise LengthNotMultipleOf5Error(len(data))

    return pack(data)

def decode(val):
    "Decodes a string produced by encode(..) back into bytes."

    _check_str(val)

    # Separators only help readability.
    fixed = strip_separators(val)

    if not fixed:
        raise PaddingOutOfRangeError("")

    padding = consts.DIGIT_VALUES.get(fixed[0])
    if padding is None or padding > consts.MAX_PADDING:
        raise PaddingOutOfRangeError(fixed[0])

    fixed = fixed[1:]

    if len(fixed) % consts.BLOCK_SYMBOLS:
        raise LengthNotMultipleOf8Error(len(fixed))

    data = unpack(fixed)

    if padding:
        if len(data) < padding or any(data[-padding:]):
            raise PaddingMismatchError(padding)

        del data[-padding:]

    if log.isEnabledFor(logging.DEBUG):
        log.debug("Decoded [{}] bytes with padding [{}]."\
            .format(len(data), padding))

    return bytes(data)

def decode_strict(val):
    "Decodes a string produced by encode_strict(..) back into bytes."

    _check_str(val)

    if not is_strict(val):
        raise StrictFormatInvalidError()

    fixed = strip_separators(val)

    if len(fixed) % consts.BLOCK_SYMBOLS:
        raise LengthNotMultipleOf8Error(len(fixed))

    return bytes(unpack(fixed))

__all__ = [\
    "BfhError",
    "NilInputError",
    "LengthNotMultipleOf5Error",
    "LengthNotMultipleOf8Error",
    "PaddingOutOfRangeError",
    "PaddingMismatchError",
    "InvalidCharacterError",
    "StrictFormatInvalidError",
    "symbol_of",
    "value_of",
    "padding_for",
    "encode",
    "encode_strict",
    "decode",
    "decode_strict",
    "is_acceptable",
    "is_well_formatted",
    "is_strict",
]
