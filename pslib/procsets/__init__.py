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
Procsets are predefined PostScript procedures that go into a
document's prolog if the document needs them. They are read from .ps
files in the procset module's directory. Each file defines the
procedure of the same name and carries a version in an RCS style
Revision keyword.
"""

import re, os.path as op

revision_re = re.compile(br"\$\s*Revision:\s*(\d+)\.(\d+)\s*\$")

BUILTINS = ( "rect", "line", )

def procset_path(name):
    return op.join(op.dirname(__file__), name + ".ps")

def read_procset(name):
    """
    Return a pair of the procset’s source as bytes and its version
    as a pair of ints.
    """
    with open(procset_path(name), "br") as fp:
        ps = fp.read()

    result = revision_re.findall(ps)
    if not result:
        raise ValueError(f"Procset {name} lacks a Revision keyword.")

    major, minor = result[0]
    return ps, ( int(major), int(minor), )
