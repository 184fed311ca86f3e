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


import argparse, pathlib

from .measure import parse_size

def papersize(s):
    """
    argparse type for paper sizes: a name like “a4 landscape” or
    “<width>x<height>” in PostScript points.
    """
    if "x" in s and s not in ( "11x17", ):
        w, h = s.split("x", 1)
        try:
            return parse_size( (float(w), float(h),) )
        except ValueError:
            raise argparse.ArgumentTypeError(f"Illegal size: {s}")
    else:
        try:
            return parse_size(s)
        except KeyError:
            raise argparse.ArgumentTypeError(f"Unknown paper size: {s}")

def make_example_argument_parser(script_path, description,
                                 o=False, s=False, eps=False):
    """
    Return an ArgumentParser with the options the example scripts
    share.

    @param o: -o/--outfile, the path of the file to write. Defaults to
       the script’s name with .ps or .eps extension.
    @param s: -s/--papersize, see papersize() above, defaults to a4.
    @param eps: --eps, create an EPS document.
    """
    script_path = pathlib.Path(script_path)
    parser = argparse.ArgumentParser(prog=script_path.name,
                                     description=description)
    parser.set_defaults(script_stem=script_path.stem)

    if o:
        parser.add_argument("-o", "--outfile", type=pathlib.Path,
                            default=None,
                            help="Output file (default: script name "
                            "with .ps or .eps extension)")

    if s:
        parser.add_argument("-s", "--papersize", type=papersize,
                            default=parse_size("a4"),
                            help="Paper size name or WxH in points "
                            "(default: a4)")

    if eps:
        parser.add_argument("--eps", action="store_true", default=False,
                            help="Create Encapsulated PostScript")

    return parser

def output_path(args) -> pathlib.Path:
    """
    Return the output path for parsed example arguments.
    """
    if getattr(args, "outfile", None):
        return args.outfile
    elif getattr(args, "eps", False):
        return pathlib.Path(args.script_stem + ".eps")
    else:
        return pathlib.Path(args.script_stem + ".ps")
