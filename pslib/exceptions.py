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
This module defines pslib specific exceptions.
"""

class PSLibError(Exception): pass

class SinkWriteError(PSLibError, IOError):
    """
    Writing to a Document’s output file failed. The output written so
    far is incomplete and should be discarded.
    """
    pass

class InvalidProcedureReference(PSLibError, KeyError):
    """
    A page invokes a procedure that has not been defined in the
    document’s prolog.
    """
    pass

class DuplicateProcedureName(PSLibError, KeyError):
    """
    A strict ProcedureRegistry was asked to re-define a name.
    """
    pass

class UseAfterClose(PSLibError, ValueError): pass
