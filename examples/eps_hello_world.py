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
Create an EPS file using the builtin procedures.
"""

from pslib import utils
from pslib.dsc import DocumentBuilder, DocumentType, Page
from pslib.procedures import ProcedureRegistry
from pslib.shapes import Rect, Line

def main():
    parser = utils.make_example_argument_parser(__file__, __doc__, o=True)
    parser.set_defaults(eps=True)
    args = parser.parse_args()

    document = DocumentBuilder()\
        .document_type(DocumentType.EPS)\
        .writer(utils.output_path(args))\
        .load_procedures(ProcedureRegistry.with_builtins())\
        .bounding_box(500, 300)\
        .build()

    page = Page(500, 300)
    page.add(Rect(50, 100, 400, 100).fill_cmyk(0.5, 1, 0.5, 0)
             .via_procedure())
    page.add(Line(50, 50, 400).stroke_rgb(4, 0, 0, 1).via_procedure())
    document.add(page)

    document.close()

main()
