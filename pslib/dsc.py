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
This module assembles PostScript and Encapsulated PostScript documents
following (a small subset of) the Document Structuring Conventions as
described in Adobe's Specifications Version 3.0.

A Document writes to its output file (any binary file-like object) as
it goes: the header and the prolog, that is the procedure definitions,
on construction, each page as it is add()ed and the trailer on
close(). Pages buffer their content until they are added.

The structure of a PS document is::

   %!PS-Adobe-3.0
   header comments
   %%EndComments
   %%BeginProlog       -- only if there are procedures
     procedure definitions
   %%EndProlog
   %%Page: 1 1
   %%PageBoundingBox: 0 0 w h
   << /PageSize [w h] >> setpagedevice
     page content
   showpage
   ...
   %%Trailer
   %%Pages: n
   %%EOF

EPS documents contain a single image, their pages consist of the page
content only.
"""

import io, os, math, enum, datetime, contextlib, warnings
import collections.abc

from .base import PSBuffer, encode, ps_literal, ps_number, is_number
from .exceptions import SinkWriteError, InvalidProcedureReference, \
     UseAfterClose
from .measure import has_dimensions, parse_size
from .procedures import ProcedureRegistry
from .shapes import Shape

VERSION = "0.1.0"
DEFAULT_CREATOR = "pslib " + VERSION

class DocumentType(enum.Enum):
    PS = "PS" # PostScript
    EPS = "EPS" # Encapsulated PostScript


class Comment(object):
    """
    A DSC comment, starting with %% and containing `value`.
    """
    def __init__(self, keyword:str, value=None):
        self.keyword = keyword
        self.set(value)

    def set(self, value):
        self._value = value

        if value is None:
            self._payload = None
        elif isinstance(value, datetime.datetime):
            self._payload = ps_literal(value.isoformat())
        elif type(value) in (str, bytes) or is_number(value):
            self._payload = ps_literal(value)
        elif isinstance(value, collections.abc.Sequence):
            self._payload = b" ".join([ ps_literal(a) for a in value ])
        else:
            raise TypeError("Can’t handle " + repr(value))

    @property
    def value(self):
        return self._value

    def __bytes__(self):
        if self._value is None:
            return b"%%" + encode(self.keyword) + b"\n"
        else:
            return b"%%" + encode(self.keyword) + b": " + \
                     self._payload + b"\n"

    def write_to(self, fp):
        fp.write(bytes(self))

    def __repr__(self):
        return (f"<{self.__class__.__name__} {self.keyword}={self.value} "
                f"{repr(self._payload)}>")

class BoundingBoxComment(Comment):
    """
    A bounding box DSC comment. The coordinates are rounded outward
    to integers, as the DSC require.
    """
    def __init__(self, keyword, llx, lly, urx, ury):
        super().__init__(keyword, ( math.floor(llx), math.floor(lly),
                                    math.ceil(urx), math.ceil(ury), ))

def normalize_bounding_box(bounding_box):
    """
    Accept either (w, h) or (llx, lly, urx, ury) and return the latter.
    """
    if bounding_box is None:
        return None
    elif len(bounding_box) == 2:
        w, h = bounding_box
        return ( 0, 0, w, h, )
    elif len(bounding_box) == 4:
        return tuple(bounding_box)
    else:
        raise ValueError(f"Not a bounding box: {bounding_box}")


class Page(has_dimensions):
    """
    An ordered, append-only buffer of PostScript commands that make up
    one page. Pass either width and height in PostScript points or a
    paper size name as understood by measure.parse_size().
    """
    def __init__(self, width, height=None, label=None):
        if height is None:
            width, height = parse_size(width)

        super().__init__(max(width, 1), max(height, 1))

        self.label = label
        self.buffer = PSBuffer()
        self._required_procedures = {}

    @property
    def width(self):
        return self.w

    @property
    def height(self):
        return self.h

    def add(self, thing):
        """
        Render `thing`, a Shape, into the page’s buffer. Strings and
        bytes are taken to be PostScript commands and are added as
        they are.
        """
        if isinstance(thing, Shape):
            self.buffer.writeln(thing.to_postscript())
            for name in thing.required_procedures:
                self._required_procedures[name] = True
        elif type(thing) in ( bytes, bytearray, str, ):
            self.buffer.writeln(thing)
        else:
            raise TypeError("Can’t add " + repr(thing) + " to a page.")

        return thing

    def call(self, name:str, *operands):
        """
        Invoke procedure `name` with `operands` pushed on the stack
        in the order given.
        """
        self.buffer.print(*operands, name)
        self._required_procedures[name] = True

    @property
    def required_procedures(self):
        """
        The names of the procedures this page’s content invokes, in
        the order they were first used.
        """
        return list(self._required_procedures.keys())

    @property
    def empty(self):
        return self.buffer.empty

    def fabricate(self, document_type:DocumentType, fp, ordinal=1):
        """
        Write this page to `fp` framed as required by `document_type`.
        """
        document_type = DocumentType(document_type)
        page = PSBuffer()

        if document_type == DocumentType.PS:
            page.append(Comment("Page", ( self.label or ordinal, ordinal, )))
            page.append(BoundingBoxComment("PageBoundingBox",
                                           0, 0, self.w, self.h))
            page.print(b"<< /PageSize [%s %s] >> setpagedevice" % (
                ps_number(self.w), ps_number(self.h), ))

        page.append(self.buffer)

        if document_type == DocumentType.PS:
            page.print("showpage")

        page.write_to(fp)

    def __repr__(self):
        return "<Page %s %sx%s>" % ( self.label, self.w, self.h, )


class GuardedSink(object):
    """
    Stand in for a Document’s output file while writing to it.
    Errors raised by the file, OSErrors and the ValueError a closed
    file raises, become SinkWriteErrors and leave the document failed.
    """
    def __init__(self, document):
        self.document = document

    def _call(self, method, *args):
        try:
            return method(*args)
        except ( OSError, ValueError, ) as exc:
            self.document.failed = True
            raise SinkWriteError(f"Can’t write document: {exc}") from exc

    def write(self, data):
        return self._call(self.document.fp.write, data)

    def flush(self):
        if hasattr(self.document.fp, "flush"):
            self._call(self.document.fp.flush)


class Document(object):
    """
    A PostScript or EPS document being written to `fp`.

    @param fp: A file-like object opened for binary writing or a path
       to the file to be created. Defaults to an in-memory buffer, see
       getvalue().
    @param document_type: DocumentType.PS or DocumentType.EPS
    @param procedures: ProcedureRegistry whose procedures are written
       to the prolog. Pages may only invoke these.
    @param bounding_box: (w, h) or (llx, lly, urx, ury). Written to the
       header of EPS documents. If None, EPS documents will calculate it
       from their page and put it into the trailer.
    """
    def __init__(self, fp=None, document_type=DocumentType.PS,
                 procedures:ProcedureRegistry=None, bounding_box=None,
                 creator=DEFAULT_CREATOR, title=None, creation_date=None):
        self.document_type = DocumentType(document_type)

        if procedures is None:
            procedures = ProcedureRegistry()
        self.procedures = procedures

        self.bounding_box = normalize_bounding_box(bounding_box)
        self.creator = creator
        self.title = title
        self.creation_date = creation_date

        self.preamble_written = False
        self.defined_procedures = set()
        self.page_count = 0
        self._page_sizes = []

        self.closed = False
        self.failed = False

        self._owns_fp = False
        if fp is None:
            fp = io.BytesIO()
        elif isinstance(fp, ( str, os.PathLike, )):
            fp = open(fp, "wb")
            self._owns_fp = True
        self.fp = fp

        try:
            with self._writing() as fp:
                self.header().write_to(fp)

            self.write_preamble()
        except Exception:
            if self._owns_fp:
                self.fp.close()
            raise

    @contextlib.contextmanager
    def _writing(self):
        """
        Guard all writes to our output file. A write error leaves the
        document invalid, all further writes are refused.
        """
        if self.closed:
            raise UseAfterClose("The document has been closed.")

        if self.failed:
            raise SinkWriteError("A previous write failed, the document "
                                 "is incomplete.")

        yield GuardedSink(self)

    def header(self):
        header = PSBuffer()

        if self.document_type == DocumentType.PS:
            header.print("%!PS-Adobe-3.0")
        else:
            header.print("%!PS-Adobe-3.0 EPSF-3.0")
            if self.bounding_box is None:
                header.append(Comment("BoundingBox", b"atend"))
            else:
                header.append(BoundingBoxComment("BoundingBox",
                                                 *self.bounding_box))

        if self.creator:
            header.append(Comment("Creator", self.creator))
        if self.title:
            header.append(Comment("Title", self.title))
        if self.creation_date:
            header.append(Comment("CreationDate", self.creation_date))

        if self.document_type == DocumentType.PS:
            header.append(Comment("Pages", b"atend"))
        else:
            header.append(Comment("Pages", 1))

        header.append(Comment("EndComments"))

        return header

    def write_preamble(self):
        """
        Write the procedure definitions to the prolog. This happens
        exactly once, on construction, before any page.
        """
        if self.preamble_written:
            return

        procedures = self.procedures.list_procedures()

        if procedures:
            prolog = PSBuffer()
            prolog.append(Comment("BeginProlog"))
            for procedure in procedures:
                prolog.writeln(procedure.body)
            prolog.append(Comment("EndProlog"))

            with self._writing() as fp:
                prolog.write_to(fp)

            self.defined_procedures.update(
                [ procedure.name for procedure in procedures ])

        self.preamble_written = True

    def add(self, page:Page):
        """
        Write `page` to the output file.
        """
        if self.closed:
            raise UseAfterClose("Can’t add pages to a closed document.")

        missing = [ name for name in page.required_procedures
                    if name not in self.defined_procedures ]
        if missing:
            raise InvalidProcedureReference(
                "Page invokes undefined procedure(s): " + ", ".join(missing))

        if self.document_type == DocumentType.EPS and self.page_count > 0:
            warnings.warn("EPS documents should contain a single page only.")

        with self._writing() as fp:
            page.fabricate(self.document_type, fp, self.page_count + 1)

        self.page_count += 1
        self._page_sizes.append( (page.w, page.h,) )

        return page

    def calculate_bounding_box(self):
        if self._page_sizes:
            return ( 0, 0,
                     max([ w for w, h in self._page_sizes ]),
                     max([ h for w, h in self._page_sizes ]), )
        else:
            return ( 0, 0, 0, 0, )

    def trailer(self):
        trailer = PSBuffer()
        trailer.append(Comment("Trailer"))

        if self.document_type == DocumentType.PS:
            trailer.append(Comment("Pages", self.page_count))
        elif self.bounding_box is None:
            trailer.append(BoundingBoxComment(
                "BoundingBox", *self.calculate_bounding_box()))

        trailer.append(Comment("EOF"))

        return trailer

    def close(self):
        """
        Write the trailer and the %%EOF comment and flush the output
        file. Close it, if we opened it.
        """
        try:
            with self._writing() as fp:
                self.trailer().write_to(fp)
                fp.flush()
        finally:
            self.closed = True
            if self._owns_fp:
                self.fp.close()

    def getvalue(self) -> bytes:
        """
        Return the document written so far if it is written to memory.
        """
        if not hasattr(self.fp, "getvalue"):
            raise TypeError("This document is not written to memory.")
        return self.fp.getvalue()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        if not self.closed:
            if self.failed:
                self.closed = True
                if self._owns_fp:
                    self.fp.close()
            else:
                self.close()


class DocumentBuilder(object):
    """
    Collect the configuration of a Document, step by step, in any
    order, and build() it::

       document = DocumentBuilder().document_type(DocumentType.EPS)\\
                    .load_procedures(ProcedureRegistry.with_builtins())\\
                    .bounding_box(500, 300).build()
    """
    def __init__(self):
        self._options = { "fp": None,
                          "document_type": DocumentType.PS,
                          "procedures": ProcedureRegistry(),
                          "bounding_box": None,
                          "creator": DEFAULT_CREATOR,
                          "title": None,
                          "creation_date": None, }
        self._built = False

    @classmethod
    def builder(cls):
        return cls()

    def document_type(self, document_type:DocumentType):
        self._options["document_type"] = DocumentType(document_type)
        return self

    def writer(self, fp):
        """
        `fp` is a file-like object opened for binary writing or a path.
        """
        self._options["fp"] = fp
        return self

    def load_procedures(self, registry:ProcedureRegistry):
        """
        Add the procedures in `registry` to the document’s prolog.
        """
        self._options["procedures"].update(registry)
        return self

    def bounding_box(self, width, height):
        self._options["bounding_box"] = ( 0, 0,
                                          max(width, 1), max(height, 1), )
        return self

    def creator(self, creator:str):
        self._options["creator"] = creator
        return self

    def title(self, title:str):
        self._options["title"] = title
        return self

    def creation_date(self, creation_date:datetime.datetime):
        self._options["creation_date"] = creation_date
        return self

    def build(self) -> Document:
        if self._built:
            raise RuntimeError("This builder has already built its "
                               "Document.")
        self._built = True
        return Document(**self._options)
