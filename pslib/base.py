#!/usr/bin/python

##  This file is part of pslib.
##
##  Copyright 2006–24 by Diedrich Vorberg <diedrich@tux4web.de>
##
##  All Rights Reserved
##
##  For more Information on orm see the README file.
##
##  This program is free software; you can redistribute it and/or modify
##  it under the terms of the GNU General Public License as published by
##  the Free Software Foundation; either version 2 of the License, or
##  (at your option) any later version.
##
##  This program is distributed in the hope that it will be useful,
##  but WITHOUT ANY WARRANTY; without even the implied warranty of
##  MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
##  GNU General Public License for more details.
##
##  You should have received a copy of the GNU General Public License
##  along with this program; if not, write to the Free Software
##  Foundation, Inc., 51 Franklin St, Fifth Floor, Boston, MA  02110-1301  USA
##
##  I have added a copy of the GPL in the file gpl.txt.


"""
Byte level building blocks: literal conversion and the PSBuffer, an
append-only container for PostScript source.
"""

import io, math, numbers, decimal
from collections.abc import Iterable

STRING_ENCODING="utf-8"

def encode(s):
    if type(s) is str:
        return s.encode(STRING_ENCODING)
    else:
        return s

def ps_escape(s, always_parenthesis:bool=True) -> bytes:
    """
    Return a PostScript string literal containing s.

    @param always_parenthesis: If set, the returned literal will always
      have ()s around it. If it is not set, this will only happen, if
      “s” contains a space char.
    """
    chars = encode(s)

    if not always_parenthesis and b" " in chars:
        always_parenthesis = True

    ret = bytearray()
    if always_parenthesis:
        ret.extend(b"(")

    for a in chars:
        if (a < 32) or (a in br"\()"):
            ret.extend(b"\\%03o" % a)
        else:
            ret.append(a)

    if always_parenthesis:
        ret.extend(b")")

    return bytes(ret)

def is_number(thing):
    """
    Anything real valued except booleans: int, float and their
    subclasses (numpy scalars included), Fraction and Decimal.
    """
    return (isinstance(thing, ( numbers.Real, decimal.Decimal, ))
            and not isinstance(thing, bool))

def ps_number(value) -> bytes:
    """
    Format a number in plain decimal notation, the way PostScript
    likes it: no exponent, at most three fractional digits, no
    trailing zeros and never “-0”.
    """
    if isinstance(value, bool):
        raise TypeError("Booleans are not numbers in PostScript.")

    if isinstance(value, numbers.Integral):
        return b"%i" % int(value)

    value = float(value)
    if not math.isfinite(value):
        raise ValueError(f"Can’t express {value} in PostScript.")

    ret = bytearray(b"%.3f" % value)
    while ret[-1] == b"0"[0]:
        del ret[-1]
    if ret[-1] == b"."[0]:
        del ret[-1]

    if ret == b"-0":
        return b"0"
    else:
        return bytes(ret)

def ps_literal(value) -> bytes:
    """
    Convert Python primitive into a PostScript/DSC literal. Numbers
    are formatted by ps_number(), strings will be quoted according to
    the DSC's rules as layed out in the specifications on page 36
    (section 4.6, on <text>).
    """
    if type(value) in ( str, bytes, bytearray, ):
        return ps_escape(value, True)
    elif is_number(value):
        return ps_number(value)
    elif isinstance(value, Iterable):
        return b"[ " + b" ".join([ps_literal(v) for v in value]) + b" ]"
    else:
        return encode(str(value))


class PSBuffer(object):
    """
    Contain PostScript source as byte-strings and other objects that
    know how to write_to() a file (which must be in binary mode). All
    methods also accept strings and numbers as input, which will be
    converted to bytes.

    The buffer is append-only. Its content is written in the order it
    was added.
    """
    def __init__(self, *things):
        self._things = list()
        self.write(*things)

    def _convert(self, thing):
        if type(thing) is bytes or \
           isinstance(thing, bytearray) \
           or hasattr(thing, "write_to"):
            return thing
        elif hasattr(thing, "__bytes__"):
            return bytes(thing)
        elif thing is None:
            return b""
        elif is_number(thing):
            return ps_number(thing)
        else:
            return bytes(str(thing).encode(STRING_ENCODING))

    def write(self, *things):
        self._things.extend([ self._convert(thing) for thing in things ])

    def append(self, thing):
        self.write(thing)
        return thing

    def print(self, *args, sep=b" ", end=b"\n"):
        """
        This works just like print() except that it will accept everything
        write() does and does what one would expect.
        """
        if args:
            for a in args[:-1]:
                self.write(a)
                if sep:
                    self.write(sep)

            self.write(args[-1])

        if end:
            self.write(end)

    def writeln(self, thing):
        """
        Append `thing` and make sure it is followed by a newline
        unless it already ends in whitespace.
        """
        thing = self._convert(thing)
        if hasattr(thing, "write_to"):
            self.write(thing)
        elif thing:
            if thing[-1] not in b"\n\t\r ":
                thing = bytes(thing) + b"\n"
            self.write(thing)

    def write_to(self, fp):
        """
        `fp` must be in binary mode.
        """
        for thing in self._things:
            if hasattr(thing, "write_to"):
                thing.write_to(fp)
            else:
                fp.write(thing)

    def getvalue(self) -> bytes:
        fp = io.BytesIO()
        self.write_to(fp)
        return fp.getvalue()

    def __bytes__(self):
        return self.getvalue()

    def __len__(self):
        return len(self._things)

    @property
    def empty(self):
        return len(self._things) == 0
