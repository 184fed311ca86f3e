#!/usr/bin/env python

##  This file is part of pslib.
##
##  Copyright 2024 by Diedrich Vorberg <diedrich@tux4web.de>
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
Draw a few rectangles and lines on two pages of a PostScript document.
"""

from pslib import utils
from pslib.dsc import Document, Page
from pslib.shapes import Rect, Line, Text, TransformOrigin

def main():
    parser = utils.make_example_argument_parser(__file__, __doc__,
                                                o=True, s=True)
    args = parser.parse_args()

    with Document(utils.output_path(args), title="Hello, world!") as document:
        page = Page(*args.papersize)

        page.add(Line(100, 100, 100)
                 .rotate(45)
                 .set_origin(TransformOrigin.BOTTOM_LEFT)
                 .stroke_cmyk(2, 1, 0, 0, 0.25))
        page.add(Rect(0, 0, 100, 100)
                 .fill_rgb(1, 0, 0)
                 .stroke_rgb(2, 0, 0, 0))
        page.add(Rect(155, 155, 100, 100)
                 .fill_rgb(1, 0, 0)
                 .rotate(45)
                 .scale(1.5, 1)
                 .stroke_rgb(2, 0, 0, 0))
        page.add(Text(72, page.h - 72, "Hello, world!", size=20))
        document.add(page)

        page = Page(500, 300)
        page.add(Rect(50, 100, 400, 100).stroke_cmyk(2, 0, 1, 0, 0))
        document.add(page)

main()
