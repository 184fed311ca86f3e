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
Embed a raster image (any format Pillow reads) once and draw it
several times.
"""

import pathlib

from pslib import utils
from pslib.dsc import Document, Page
from pslib.images import ImageRegistry
from pslib.measure import mm
from pslib.procedures import ProcedureRegistry
from pslib.shapes import Image, ImageFit

def main():
    parser = utils.make_example_argument_parser(
        __file__, __doc__, o=True, s=True)
    parser.add_argument("imgpath", type=pathlib.Path)
    args = parser.parse_args()

    images = ImageRegistry()
    raw = images.add(args.imgpath)
    procedures = images.load_into(ProcedureRegistry())

    with Document(utils.output_path(args), procedures=procedures) as document:
        page = Page(*args.papersize)
        w = (page.w - mm(54)) / 2
        h = (page.h - mm(54)) / 2

        for x, y in ( (mm(18), mm(18)), (mm(36) + w, mm(36) + h), ):
            page.add(Image(raw, x, y, w, h, fit=ImageFit.CONTAIN)
                     .stroke_rgb(0.1, 0, 0, 0))

        page.add(Image(raw, mm(36) + w, mm(18), w, h).rotate(10))
        document.add(page)

main()
