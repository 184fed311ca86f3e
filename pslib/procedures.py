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
Named PostScript procedures (macros) and the registry that collects
them for a document’s prolog.
"""

from .base import encode
from .exceptions import DuplicateProcedureName
from . import procsets

class Procedure(object):
    """
    A named block of PostScript that defines `name` when executed.
    The body is written to the prolog verbatim.
    """
    def __init__(self, name:str, body):
        self.name = name
        self.body = encode(body)

    def __eq__(self, other):
        return (isinstance(other, Procedure)
                and self.name == other.name
                and self.body == other.body)

    def __repr__(self):
        return f"<{self.__class__.__name__} {self.name}>"

class ProcedureRegistry(object):
    """
    Map procedure names to Procedure objects, remembering the order in
    which they were registered. That order is the order of the
    definitions in the document’s prolog.

    Registering a name twice replaces the earlier procedure, keeping
    its place in the order, unless the registry is `strict`, in which
    case DuplicateProcedureName is raised.
    """
    def __init__(self, *procedures, strict:bool=False):
        self.strict = strict
        self._procedures = {}

        for procedure in procedures:
            self.add_procedure(procedure)

    def add_procedure(self, procedure:Procedure):
        if self.strict and procedure.name in self._procedures:
            raise DuplicateProcedureName(procedure.name)

        self._procedures[procedure.name] = procedure
        return procedure

    def get_procedure(self, name:str):
        """
        Return the Procedure registered as `name` or None.
        """
        return self._procedures.get(name, None)

    def list_procedures(self):
        return list(self._procedures.values())

    def names(self):
        return list(self._procedures.keys())

    def update(self, other):
        for procedure in other.list_procedures():
            self.add_procedure(procedure)

    def __contains__(self, name):
        return name in self._procedures

    def __iter__(self):
        return iter(self.list_procedures())

    def __len__(self):
        return len(self._procedures)

    @classmethod
    def with_builtins(cls, strict:bool=False):
        """
        Return a registry containing pslib’s builtin procedures, `rect`
        and `line`.
        """
        ret = cls(strict=strict)
        for name in procsets.BUILTINS:
            body, version = procsets.read_procset(name)
            ret.add_procedure(Procedure(name, body))
        return ret
