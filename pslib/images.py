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
Raster images are embedded in a document’s prolog once, as a
procedure, and then drawn from as many pages as needed by invoking
that procedure (see shapes.Image). Pillow reads the images, so any
format it supports will do.

Each call to ImageRegistry.add() mints a new procedure name, even for
a file that has been registered before. Repeated registration is the
caller’s choice and results in repeated embedding.
"""

import os, os.path as op

from PIL import Image as PILImage

from .base import PSBuffer
from .measure import has_dimensions
from .procedures import Procedure

# Bytes of image data per line of hex in the prolog.
HEX_LINE_LENGTH = 30

def file_identity(path) -> str:
    return os.fspath(path)

class RawImage(has_dimensions):
    """
    An image file registered under `procedure_name`. Its size in
    pixels is read from the file’s header on construction. The pixel
    data is read only when the procedure is created.
    """
    def __init__(self, file_path, procedure_name:str):
        self.file_path = file_path
        self.file_name = op.basename(file_identity(file_path))
        self.procedure_name = procedure_name

        with PILImage.open(file_path) as pil_image:
            w, h = pil_image.size

        super().__init__(w, h)

    @property
    def width(self):
        return self.w

    @property
    def height(self):
        return self.h

    def read_pixels(self) -> bytes:
        with PILImage.open(self.file_path) as pil_image:
            if pil_image.mode != "RGB":
                pil_image = pil_image.convert("RGB")
            return pil_image.tobytes()

    def procedure(self) -> Procedure:
        """
        Return a Procedure that, in the prolog, reads the image data
        into a reusable stream and defines a procedure that paints
        the image into the unit square of the current user space.
        """
        name = self.procedure_name
        data = self.read_pixels()

        body = PSBuffer()
        body.print(f"/{name}Data currentfile /ASCIIHexDecode filter "
                   f"/ReusableStreamDecode filter")
        for a in range(0, len(data), HEX_LINE_LENGTH):
            body.print(data[a:a+HEX_LINE_LENGTH].hex())
        body.print(">")
        body.print("def")
        body.print(f"/{name} {{")
        body.print(f"{name}Data 0 setfileposition")
        body.print(self.w, self.h, 8,
                   "[", self.w, 0, 0, -self.h, 0, self.h, "]")
        body.print(f"{name}Data")
        body.print("false 3 colorimage")
        body.print("} bind def")

        return Procedure(name, body.getvalue())

    def __repr__(self):
        return f"<RawImage {self.procedure_name} {self.file_name} " \
               f"{self.w}x{self.h}>"

class ImageRegistry(object):
    def __init__(self):
        self._count = 0
        self._images = {} # procedure name -> RawImage
        self._by_identity = {} # file identity -> latest procedure name

    def add(self, path) -> RawImage:
        """
        Register the image file at `path` under a new procedure name
        and return its RawImage.
        """
        # Files Pillow can’t read don’t use up a number.
        image = RawImage(path, f"image{self._count + 1}")
        self._count += 1

        procedure_name = image.procedure_name
        self._images[procedure_name] = image
        self._by_identity[file_identity(path)] = procedure_name

        return image

    def get_procedure_id(self, path):
        """
        Return the most recent procedure name for `path` or None.
        """
        return self._by_identity.get(file_identity(path), None)

    def get_image(self, procedure_name):
        return self._images.get(procedure_name, None)

    def images(self):
        return list(self._images.values())

    def procedures(self):
        for image in self._images.values():
            yield image.procedure()

    def load_into(self, registry):
        """
        Add the procedures of all registered images to `registry`, a
        ProcedureRegistry, and return it.
        """
        for procedure in self.procedures():
            registry.add_procedure(procedure)
        return registry

    def __len__(self):
        return len(self._images)
