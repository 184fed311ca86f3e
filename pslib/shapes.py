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
Vector graphics primitives. Each shape knows how to render itself as
PostScript commands (to_postscript(), or simply bytes(shape)) that a
Page will buffer.

Shapes behave like values: the paint and transform methods return a
modified copy and leave the original alone, so they may be chained::

   Rect(0, 0, 100, 100).fill_rgb(1, 0, 0).stroke_rgb(2, 0, 0, 0)
"""

import copy, enum

from .base import PSBuffer, ps_escape
from .colors import RGBColor, CMYKColor, black
from .measure import Rectangle

class TransformOrigin(enum.Enum):
    """
    The point of a shape’s bounding box that stays put when it is
    rotated or scaled.
    """
    CENTER = "center"
    BOTTOM_LEFT = "bottom left"
    TOP_LEFT = "top left"
    TOP_RIGHT = "top right"
    BOTTOM_RIGHT = "bottom right"

class ImageFit(enum.Enum):
    STRETCH = "stretch"
    CONTAIN = "contain"
    STRETCH_HORIZONTAL = "stretch horizontal"
    STRETCH_VERTICAL = "stretch vertical"
    CROP = "crop"


class Shape(object):
    """
    Abstract base class. Subclasses provide bounds() and
    write_body_to(), the latter putting the shape’s path and paint
    operators into a PSBuffer.
    """
    default_stroke_width = 0.0

    def __init__(self):
        self.stroke_width = self.default_stroke_width
        self.stroke_color = black
        self.fill_color = None

        self.rotation = 0.0
        self.scale_x = 1.0
        self.scale_y = 1.0
        self.origin = TransformOrigin.CENTER

        self.procedure_name = None

    def _replace(self, **attributes):
        ret = copy.copy(self)
        for name, value in attributes.items():
            setattr(ret, name, value)
        return ret

    # Paint
    def stroke_rgb(self, width, r, g, b):
        return self._replace(stroke_width=max(float(width), 0.0),
                             stroke_color=RGBColor(r, g, b))

    def stroke_cmyk(self, width, c, m, y, k):
        return self._replace(stroke_width=max(float(width), 0.0),
                             stroke_color=CMYKColor(c, m, y, k))

    # Transformation
    def rotate(self, angle):
        """
        Rotate counter-clockwise by `angle` degrees around the origin
        point. The angle is limited to ±360°.
        """
        return self._replace(rotation=min(max(float(angle), -360.0), 360.0))

    def scale(self, x, y):
        return self._replace(scale_x=float(x), scale_y=float(y))

    def set_origin(self, origin:TransformOrigin):
        return self._replace(origin=TransformOrigin(origin))

    @property
    def transformed(self):
        return (self.rotation != 0.0
                or self.scale_x != 1.0
                or self.scale_y != 1.0)

    def bounds(self) -> Rectangle:
        raise NotImplementedError()

    def origin_point(self):
        bounds = self.bounds()

        if self.origin == TransformOrigin.CENTER:
            return bounds.center
        elif self.origin == TransformOrigin.BOTTOM_LEFT:
            return ( bounds.llx, bounds.lly, )
        elif self.origin == TransformOrigin.TOP_LEFT:
            return ( bounds.llx, bounds.ury, )
        elif self.origin == TransformOrigin.TOP_RIGHT:
            return ( bounds.urx, bounds.ury, )
        else:
            return ( bounds.urx, bounds.lly, )

    @property
    def required_procedures(self):
        """
        Names of the procedures the output of this shape invokes.
        """
        if self.procedure_name:
            return ( self.procedure_name, )
        else:
            return ()

    def to_postscript(self) -> bytes:
        buffer = PSBuffer()

        if self.transformed:
            ox, oy = self.origin_point()

            buffer.print("gsave")
            buffer.print(ox, oy, "translate")
            if self.rotation != 0.0:
                buffer.print(self.rotation, "rotate")
            if self.scale_x != 1.0 or self.scale_y != 1.0:
                buffer.print(self.scale_x, self.scale_y, "scale")
            buffer.print(-ox, -oy, "translate")

        self.write_body_to(buffer)

        if self.transformed:
            buffer.print("grestore")

        return buffer.getvalue()

    def __bytes__(self):
        return self.to_postscript()

    def write_body_to(self, buffer:PSBuffer):
        raise NotImplementedError()

    def write_fill_to(self, buffer:PSBuffer):
        """
        Fill the current path, keeping it for a subsequent stroke.
        """
        if self.fill_color is not None:
            buffer.print("gsave")
            buffer.print(self.fill_color)
            buffer.print("fill")
            buffer.print("grestore")

    def write_stroke_to(self, buffer:PSBuffer):
        if self.stroke_width > 0:
            buffer.print("gsave")
            buffer.print(self.stroke_width, "setlinewidth")
            buffer.print(self.stroke_color)
            buffer.print("stroke")
            buffer.print("grestore")

    def __repr__(self):
        return "<%s %s>" % ( self.__class__.__name__,
                             repr(self.bounds().as_tuple()), )

class FilledShape(Shape):
    def fill_rgb(self, r, g, b):
        return self._replace(fill_color=RGBColor(r, g, b))

    def fill_cmyk(self, c, m, y, k):
        return self._replace(fill_color=CMYKColor(c, m, y, k))


class Rect(FilledShape, Rectangle):
    """
    An axis-parallel rectangle with its lower left corner at (x, y).
    """
    def __init__(self, x, y, w, h):
        FilledShape.__init__(self)
        Rectangle.__init__(self, x, y, max(w, 0), max(h, 0))

    def via_procedure(self, name="rect"):
        """
        Draw the path by invoking the `rect` procedure (see
        ProcedureRegistry.with_builtins()) instead of spelling it out.
        """
        return self._replace(procedure_name=name)

    def bounds(self):
        return Rectangle(self.x, self.y, self.w, self.h)

    def write_body_to(self, buffer):
        x, y, w, h = self.x, self.y, self.w, self.h

        if self.procedure_name:
            # The procedure consumes its operands in reverse order:
            # moveto first, then the four rlinetos.
            buffer.print(-w, 0, 0, -h, w, 0, 0, h, x, y, self.procedure_name)
        else:
            buffer.print("newpath")
            buffer.print(x, y, "moveto")
            buffer.print(0, h, "rlineto")
            buffer.print(w, 0, "rlineto")
            buffer.print(0, -h, "rlineto")
            buffer.print(-w, 0, "rlineto")
            buffer.print("closepath")

        self.write_fill_to(buffer)
        self.write_stroke_to(buffer)


class Line(Shape):
    """
    A horizontal line of `length` starting at (x, y). Use rotate() for
    other directions. Lines are stroked 1pt black by default.
    """
    default_stroke_width = 1.0

    def __init__(self, x, y, length):
        super().__init__()
        self.x = x
        self.y = y
        self.length = max(length, 0)

    def via_procedure(self, name="line"):
        return self._replace(procedure_name=name)

    def bounds(self):
        return Rectangle(self.x, self.y, self.length, 0)

    def write_body_to(self, buffer):
        if self.procedure_name:
            buffer.print(self.length, 0, self.x, self.y, self.procedure_name)
        else:
            buffer.print("newpath")
            buffer.print(self.x, self.y, "moveto")
            buffer.print(self.length, 0, "rlineto")

        self.write_stroke_to(buffer)


class Text(FilledShape):
    """
    A single line of text set with a PostScript font that is available
    to the interpreter. There is no layout here: the text is shown
    starting at (x, y) on its baseline.
    """
    def __init__(self, x, y, text, font="Helvetica", size=12):
        super().__init__()
        self.x = x
        self.y = y
        self.text = text
        self.font = font
        self.size = size

    def bounds(self):
        # Without font metrics, the width is unknown.
        return Rectangle(self.x, self.y, 0, self.size)

    def write_body_to(self, buffer):
        literal = ps_escape(self.text)

        buffer.print("gsave")
        buffer.print("/" + self.font, "findfont")
        buffer.print(self.size, "scalefont")
        buffer.print("setfont")

        if self.fill_color is not None or self.stroke_width <= 0:
            if self.fill_color is not None:
                buffer.print(self.fill_color)
            buffer.print(self.x, self.y, "moveto")
            buffer.print(literal, "show")

        if self.stroke_width > 0:
            buffer.print("newpath")
            buffer.print(self.x, self.y, "moveto")
            buffer.print(literal, "false", "charpath")
            self.write_stroke_to(buffer)

        buffer.print("grestore")


class Image(Shape):
    """
    Draw an image registered with an ImageRegistry by invoking its
    procedure. `image` is either the RawImage returned by
    ImageRegistry.add() or a procedure name.

    How the image fills the (w, h) box at (x, y) depends on `fit`:

      - STRETCH: exactly the box, regardless of the aspect ratio
      - CONTAIN: proportionally, as large as fits into the box
      - STRETCH_HORIZONTAL: the box’s width, proportional height
      - STRETCH_VERTICAL: the box’s height, proportional width
      - CROP: proportionally covering the whole box, centered and
        clipped to it

    All but STRETCH need a RawImage, which knows its pixel size. The
    image is anchored at (x, y) except for CROP.

    A stroke will draw a border around the image’s bounds.
    """
    def __init__(self, image, x, y, w, h, fit=ImageFit.STRETCH):
        super().__init__()
        self.image = image
        self.x = x
        self.y = y
        self.w = max(w, 0)
        self.h = max(h, 0)
        self.fit = ImageFit(fit)

        self.procedure_name = getattr(image, "procedure_name", image)

        if self.fit != ImageFit.STRETCH and not hasattr(image, "width"):
            raise TypeError(f"{self.fit} needs a RawImage, "
                            "not " + repr(image))

    def size(self):
        """
        Return the size of the image as drawn (before clipping).
        """
        if self.fit == ImageFit.STRETCH:
            return ( self.w, self.h, )

        horizontal = self.w / self.image.width
        vertical = self.h / self.image.height

        if self.fit == ImageFit.CONTAIN:
            factor = min(horizontal, vertical)
        elif self.fit == ImageFit.CROP:
            factor = max(horizontal, vertical)
        elif self.fit == ImageFit.STRETCH_HORIZONTAL:
            factor = horizontal
        else:
            factor = vertical

        return ( self.image.width * factor,
                 self.image.height * factor, )

    def bounds(self):
        if self.fit == ImageFit.CROP:
            return Rectangle(self.x, self.y, self.w, self.h)
        else:
            w, h = self.size()
            return Rectangle(self.x, self.y, w, h)

    def write_box_path_to(self, buffer, box):
        buffer.print("newpath")
        buffer.print(box.x, box.y, "moveto")
        buffer.print(0, box.h, "rlineto")
        buffer.print(box.w, 0, "rlineto")
        buffer.print(0, -box.h, "rlineto")
        buffer.print(-box.w, 0, "rlineto")
        buffer.print("closepath")

    def write_body_to(self, buffer):
        w, h = self.size()
        bounds = self.bounds()
        x, y = self.x, self.y

        buffer.print("gsave")

        if self.fit == ImageFit.CROP:
            self.write_box_path_to(buffer, bounds)
            buffer.print("clip")
            x += (self.w - w) / 2.0
            y += (self.h - h) / 2.0

        buffer.print(x, y, "translate")
        buffer.print(w, h, "scale")
        buffer.print(self.procedure_name)
        buffer.print("grestore")

        if self.stroke_width > 0:
            self.write_box_path_to(buffer, bounds)
            self.write_stroke_to(buffer)
