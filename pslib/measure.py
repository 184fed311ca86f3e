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
Paper sizes, units and simple geometry. All lengths are in PostScript
points (1/72 inch).
"""

PAPERSIZES = {
    # Page sizes defined by Adobe documentation
    "11x17": (792, 1224),
    "ledger": (1224, 792), # 11x17 landscape
    "legal": (612, 1008),
    "letter": (612, 792),
    "halfletter": (396, 612),

    # ISO standard paper sizes
    "a0": (2380, 3368),
    "a1": (1684, 2380),
    "a2": (1190, 1684),
    "a3": (842, 1190),
    "a4": (595, 842),
    "a5": (421, 595),
    "a6": (297, 421),
    "a7": (210, 297),
    "a8": (148, 210),

    "b3": (1002, 1418),
    "b4": (709, 1002),
    "b5": (501, 709),
    "b6": (354, 501),
}


def parse_size(size):
    """
    Return a (width, height) pair of floats for `size`, which may be
    a paper size name (optionally followed by “landscape” or
    “portrait”), a pair of numbers or a single number for a square.
    """
    if type(size) is str:
        name = size.lower().strip()

        if name.endswith("landscape"):
            name = name[:-len("landscape")].strip()
            w, h = parse_size(name)
            return h, w
        elif name.endswith("portrait"):
            name = name[:-len("portrait")].strip()
            return parse_size(name)
        elif name in PAPERSIZES:
            w, h =  PAPERSIZES[name]
            return float(w), float(h)
        else:
            raise KeyError(name)

    elif type(size) in ( tuple, list, ):
        w, h = size
        return float(w), float(h),

    elif type(size) in ( float, int, ):
        return float(size), float(size),
    else:
        raise TypeError(repr(size))


# Units - convert everybody's units to PostScript Points

def pt(l):
    return l

def cm(l):
    return l / 2.54 * 72.0

def mm(l):
    return l / 25.4 * 72.0

def inch(l):
    return l * 72.0


class has_location(object):
    def __init__(self, x, y):
        self._x = x
        self._y = y

    @property
    def x(self):
        return self._x

    @property
    def y(self):
        return self._y

class has_dimensions(object):
    def __init__(self, w, h):
        self._w = w
        self._h = h

    @property
    def w(self):
        return self._w

    @property
    def h(self):
        return self._h

class Rectangle(has_location, has_dimensions):
    def __init__(self, x, y, w, h):
        has_location.__init__(self, x, y)
        has_dimensions.__init__(self, w, h)

    @property
    def llx(self):
        return self._x

    @property
    def urx(self):
        return self._x + self._w

    @property
    def lly(self):
        return self._y

    @property
    def ury(self):
        return self._y + self._h

    @property
    def center(self):
        return ( self._x + self._w / 2.0, self._y + self._h / 2.0, )

    def as_tuple(self):
        return ( self.llx, self.lly, self.urx, self.ury, )

    def __repr__(self):
        return "<%s %s>" % ( self.__class__.__name__, repr(self.as_tuple()), )
