# Copyright (c) 2014-2015  Sam Maloney.
# License: GPL v2.

# Validators for bfh strings. None of these decode; they answer yes or no
# from the shape of the string and the padding it claims.

import llog

import logging
import re

import consts

log = logging.getLogger(__name__)

_symbol_class = "[" + re.escape(consts.DIGITS) + "]"
_sep = re.escape(consts.SEPARATOR)
_padding_class = "[" + consts.DIGITS[:consts.MAX_PADDING + 1] + "]"
_group = "{}{{{}}}".format(_symbol_class, consts.GROUP_SIZE)

# Valid encoded strings never end in a separator; callers append one before
# matching the well formatted and strict patterns.
well_formatted_re = re.compile(\
    "{pad}{sep}({group}{sep})*".format(\
        pad=_padding_class, sep=_sep, group=_group))
acceptable_re = re.compile(\
    "{pad}({group})*".format(pad=_padding_class, group=_group))
strict_re = re.compile("({group}{sep})*".format(group=_group, sep=_sep))

def strip_separators(val):
    return val.replace(consts.SEPARATOR, "")

def is_well_formatted(val):
    "True if val is laid out exactly as encode(..) would produce it."

    if type(val) is not str:
        return False

    fixed = val + consts.SEPARATOR

    if not well_formatted_re.fullmatch(fixed):
        return False

    return is_padding_correct(strip_separators(fixed))

def is_acceptable(val):
    "True if decode(..) would accept val, wherever its separators are."

    if type(val) is not str:
        return False

    fixed = strip_separators(val)

    if not acceptable_re.fullmatch(fixed):
        return False

    return is_padding_correct(fixed)

def is_strict(val):
    "True if val is usable by decode_strict(..)."

    if type(val) is not str:
        return False

    # No groups at all is what encode_strict(b"") produces.
    if not val:
        return True

    return strict_re.fullmatch(val + consts.SEPARATOR) is not None

def is_padding_correct(val):
    """Checks that the padding digit at the front of the separator free
    string val agrees with its tail.

    p padding bytes are 8*p zero bits at the end of the payload; they fill
    the last PADDING_ZERO_RUN[p] symbols completely and the low bits of the
    symbol before them."""

    l = len(val)

    if val == consts.DIGITS[0]:
        return True

    if l < consts.BLOCK_SYMBOLS + 1:
        return False

    padding = consts.DIGIT_VALUES.get(val[0])
    if padding is None or padding > consts.MAX_PADDING:
        return False

    if not padding:
        return True

    run = consts.PADDING_ZERO_RUN[padding]

    if val[l - run:] != consts.DIGITS[0] * run:
        if log.isEnabledFor(logging.DEBUG):
            log.debug("Padding [{}] needs [{}] trailing zero symbols."\
                .format(padding, run))
        return False

    return val[l - run - 1] in consts.PADDING_BOUNDARY[padding]
