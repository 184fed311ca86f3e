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


import warnings

from .base import ps_number

def clamp(value, name="color component"):
    """
    Return `value` as a float limited to 0 <= value <= 1.0. Warn if
    that changes it.
    """
    ret = min(max(float(value), 0.0), 1.0)
    if ret != value:
        warnings.warn(f"{name} {value} out of range, clamped to {ret}.")
    return ret

def rgb(r, g, b):
    """
    Each color is a float 0 <= color <= 1.0
    """
    return b"%s %s %s setrgbcolor" % ( ps_number(r), ps_number(g),
                                       ps_number(b), )

def cmyk(c, m, y, k):
    """
    Each color is a float 0 <= color <= 1.0
    """
    return b"%s %s %s %s setcmykcolor" % ( ps_number(c), ps_number(m),
                                           ps_number(y), ps_number(k), )

class Color:
    """
    A color is a value object. Its bytes are the PostScript command
    that makes it the current color.
    """
    components = ()

    def as_tuple(self):
        return tuple([ getattr(self, a) for a in self.components ])

    def __eq__(self, other):
        return (type(self) is type(other)
                and self.as_tuple() == other.as_tuple())

    def __hash__(self):
        return hash( (self.__class__.__name__,) + self.as_tuple() )

    def __repr__(self):
        return "%s%s" % ( self.__class__.__name__, repr(self.as_tuple()), )

class RGBColor(Color):
    components = ( "r", "g", "b", )

    def __init__(self, r, g, b):
        """
        Each color is a float 0 <= color <= 1.0
        """
        self.r = clamp(r, "Red")
        self.g = clamp(g, "Green")
        self.b = clamp(b, "Blue")

    def __bytes__(self):
        return rgb(self.r, self.g, self.b)

class CMYKColor(Color):
    components = ( "c", "m", "y", "k", )

    def __init__(self, c, m, y, k):
        """
        Each color is a float 0 <= color <= 1.0
        """
        self.c = clamp(c, "Cyan")
        self.m = clamp(m, "Magenta")
        self.y = clamp(y, "Yellow")
        self.k = clamp(k, "Black")

    def __bytes__(self):
        return cmyk(self.c, self.m, self.y, self.k)

def web_color(color):
    """
    Take a web-compatible hexadecimal color as a string (“#ffbe33”,
    “#fb3” or one of a few names) and return an RGBColor.
    """
    # Make sure we have a legal color string
    color = color.lower().strip()

    std_colors = { "white": "ffffff",
                   "black": "000000",
                   "red": "ff0000",
                   "green": "00ff00",
                   "blue": "0000ff" }

    if color in std_colors:
        color = std_colors[color]

    if color.startswith("#"): color = color[1:]
    if len(color) == 3: color = "".join([ c+c for c in color ])
    if len(color) != 6:
        raise ValueError(f"Not a web color: {color}")

    red = int(color[:2], 16)
    green = int(color[2:4], 16)
    blue = int(color[4:], 16)

    return RGBColor( red / 255.0, green / 255.0, blue / 255.0, )

black = RGBColor(0, 0, 0)
