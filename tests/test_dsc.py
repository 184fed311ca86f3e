import io, datetime

import pytest

from pslib.dsc import Document, DocumentBuilder, DocumentType, Page, \
     Comment, DEFAULT_CREATOR
from pslib.exceptions import SinkWriteError, InvalidProcedureReference, \
     UseAfterClose
from pslib.procedures import Procedure, ProcedureRegistry
from pslib.shapes import Rect, Image

CREATOR = b"%%Creator: (" + DEFAULT_CREATOR.encode("ascii") + b")\n"

RED_SQUARE = (b"newpath\n"
              b"0 0 moveto\n"
              b"0 100 rlineto\n"
              b"100 0 rlineto\n"
              b"0 -100 rlineto\n"
              b"-100 0 rlineto\n"
              b"closepath\n"
              b"gsave\n"
              b"1 0 0 setrgbcolor\n"
              b"fill\n"
              b"grestore\n")

def red_square_page():
    page = Page(400, 400)
    page.add(Rect(0, 0, 100, 100).fill_rgb(1, 0, 0))
    return page

class FailingSink(io.BytesIO):
    """
    A file that starts failing once `broken` is set.
    """
    broken = False

    def write(self, data):
        if self.broken:
            raise OSError(28, "No space left on device")
        return super().write(data)

def test_ps_document():
    document = Document()
    document.add(red_square_page())
    document.close()

    assert document.getvalue() == (b"%!PS-Adobe-3.0\n"
                                   + CREATOR +
                                   b"%%Pages: (atend)\n"
                                   b"%%EndComments\n"
                                   b"%%Page: 1 1\n"
                                   b"%%PageBoundingBox: 0 0 400 400\n"
                                   b"<< /PageSize [400 400] >> setpagedevice\n"
                                   + RED_SQUARE +
                                   b"showpage\n"
                                   b"%%Trailer\n"
                                   b"%%Pages: 1\n"
                                   b"%%EOF\n")

def test_eps_document():
    document = Document(document_type=DocumentType.EPS)
    document.add(red_square_page())
    document.close()

    assert document.getvalue() == (b"%!PS-Adobe-3.0 EPSF-3.0\n"
                                   b"%%BoundingBox: (atend)\n"
                                   + CREATOR +
                                   b"%%Pages: 1\n"
                                   b"%%EndComments\n"
                                   + RED_SQUARE +
                                   b"%%Trailer\n"
                                   b"%%BoundingBox: 0 0 400 400\n"
                                   b"%%EOF\n")

def test_builder_writes_builtins_before_pages():
    document = DocumentBuilder()\
        .document_type(DocumentType.EPS)\
        .load_procedures(ProcedureRegistry.with_builtins())\
        .build()

    assert document.preamble_written
    assert document.defined_procedures == { "rect", "line", }

    page = Page(500, 300)
    page.add(Rect(50, 100, 400, 100).fill_cmyk(0.5, 1, 0.5, 0).via_procedure())
    document.add(page)
    document.close()

    ps = document.getvalue()
    assert ps.index(b"%%BeginProlog\n") < ps.index(b"/rect {")
    assert ps.index(b"/rect {") < ps.index(b"/line {")
    assert ps.index(b"/line {") < ps.index(b"%%EndProlog\n")
    assert ps.index(b"%%EndProlog\n") < \
        ps.index(b"-400 0 0 -100 400 0 0 100 50 100 rect\n")
    assert b"setpagedevice" not in ps
    assert b"showpage" not in ps

def test_builder_options_in_any_order():
    date = datetime.datetime(2024, 1, 2, 3, 4, 5)
    sink = io.BytesIO()
    document = DocumentBuilder.builder()\
        .bounding_box(500, 300)\
        .title("Test")\
        .writer(sink)\
        .creation_date(date)\
        .creator("me")\
        .document_type("EPS")\
        .build()

    assert document.fp is sink
    assert document.document_type == DocumentType.EPS
    assert sink.getvalue() == (b"%!PS-Adobe-3.0 EPSF-3.0\n"
                               b"%%BoundingBox: 0 0 500 300\n"
                               b"%%Creator: (me)\n"
                               b"%%Title: (Test)\n"
                               b"%%CreationDate: (2024-01-02T03:04:05)\n"
                               b"%%Pages: 1\n"
                               b"%%EndComments\n")

    document.close()
    assert sink.getvalue().endswith(b"%%Trailer\n%%EOF\n")

def test_builder_defaults():
    document = DocumentBuilder().build()
    assert document.document_type == DocumentType.PS
    assert isinstance(document.fp, io.BytesIO)
    assert b"%%BeginProlog" not in document.getvalue()

def test_builder_builds_once():
    builder = DocumentBuilder()
    builder.build()
    with pytest.raises(RuntimeError):
        builder.build()

def test_bounding_box_is_at_least_one_point():
    document = DocumentBuilder().document_type(DocumentType.EPS)\
        .bounding_box(0, -10).build()
    assert b"%%BoundingBox: 0 0 1 1\n" in document.getvalue()

def test_preamble_is_written_once():
    document = Document(procedures=ProcedureRegistry.with_builtins())
    document.write_preamble()
    for a in range(3):
        page = Page("a4")
        page.add(Rect(0, 0, 10, 10).via_procedure())
        document.add(page)
    document.close()

    ps = document.getvalue()
    assert ps.count(b"/rect {") == 1
    assert ps.count(b"%%BeginProlog") == 1
    assert b"%%Page: 3 3\n" in ps
    assert b"%%Pages: 3\n" in ps

def test_close_writes_one_eof():
    document = Document()
    document.add(red_square_page())
    document.close()

    assert document.closed
    assert document.getvalue().count(b"%%EOF") == 1
    assert document.getvalue().endswith(b"%%EOF\n")

def test_use_after_close():
    document = Document()
    document.close()

    with pytest.raises(UseAfterClose):
        document.add(red_square_page())

    with pytest.raises(UseAfterClose):
        document.close()

    assert document.getvalue().count(b"%%EOF") == 1

def test_undefined_procedure_is_refused():
    document = Document()
    page = Page(100, 100)
    page.add(Rect(0, 0, 10, 10).via_procedure())

    with pytest.raises(InvalidProcedureReference) as info:
        document.add(page)
    assert "rect" in str(info.value)

    # Nothing of the page has been written.
    assert b"%%Page:" not in document.getvalue()
    assert document.page_count == 0

def test_images_must_be_defined():
    document = Document(procedures=ProcedureRegistry(
        Procedure("image1", "/image1 {} def")))
    page = Page(100, 100)
    page.add(Image("image1", 0, 0, 10, 10))
    document.add(page)

    page = Page(100, 100)
    page.add(Image("image2", 0, 0, 10, 10))
    with pytest.raises(InvalidProcedureReference):
        document.add(page)

def test_page_call():
    page = Page(100, 100)
    page.call("rect", -10, 0, 0, -10, 10, 0, 0, 10, 5, 5)
    assert bytes(page.buffer) == b"-10 0 0 -10 10 0 0 10 5 5 rect\n"
    assert page.required_procedures == [ "rect", ]

    with pytest.raises(InvalidProcedureReference):
        Document().add(page)

def test_sink_write_error():
    sink = FailingSink()
    document = Document(sink)
    sink.broken = True

    with pytest.raises(SinkWriteError) as info:
        document.add(red_square_page())
    assert isinstance(info.value.__cause__, OSError)
    assert document.failed

    # The document is invalid from now on.
    sink.broken = False
    with pytest.raises(SinkWriteError):
        document.add(red_square_page())

def test_sink_write_error_on_construction():
    sink = FailingSink()
    sink.broken = True
    with pytest.raises(SinkWriteError):
        Document(sink)

def test_closed_sink_is_a_write_error():
    sink = io.BytesIO()
    document = Document(sink)
    sink.close()

    with pytest.raises(SinkWriteError) as info:
        document.add(red_square_page())
    assert isinstance(info.value.__cause__, ValueError)
    assert document.failed

def test_failed_construction_closes_own_file(tmp_path, monkeypatch):
    opened = []
    def spy_open(*args, **kw):
        fp = open(*args, **kw)
        opened.append(fp)
        return fp
    monkeypatch.setattr("pslib.dsc.open", spy_open, raising=False)

    def broken_header(self):
        raise OSError(28, "No space left on device")
    monkeypatch.setattr(Document, "header", broken_header)

    with pytest.raises(OSError):
        Document(tmp_path / "out.ps")

    assert len(opened) == 1
    assert opened[0].closed

def test_bad_options_open_no_file(tmp_path):
    path = tmp_path / "out.ps"
    with pytest.raises(ValueError):
        Document(path, document_type="PDF")
    assert not path.exists()

def test_eps_with_two_pages_warns():
    document = Document(document_type=DocumentType.EPS)
    document.add(Page(10, 10))
    with pytest.warns(UserWarning):
        document.add(Page(20, 5))
    document.close()

    assert b"%%BoundingBox: 0 0 20 10\n" in document.getvalue()

def test_document_on_path(tmp_path):
    path = tmp_path / "out.ps"
    with Document(path) as document:
        document.add(red_square_page())

    assert document.closed
    assert document.fp.closed
    assert path.read_bytes().startswith(b"%!PS-Adobe-3.0\n")
    assert path.read_bytes().endswith(b"%%EOF\n")

    with pytest.raises(TypeError):
        document.getvalue()

def test_builder_on_path(tmp_path):
    path = tmp_path / "out.eps"
    document = DocumentBuilder()\
        .writer(str(path))\
        .document_type(DocumentType.EPS)\
        .build()
    document.add(red_square_page())
    document.close()

    assert path.read_bytes().count(b"%%EOF") == 1

def test_context_manager_leaves_caller_files_open():
    sink = io.BytesIO()
    with Document(sink) as document:
        pass

    assert not sink.closed
    assert sink.getvalue().endswith(b"%%EOF\n")

def test_page_size():
    page = Page("a4")
    assert (page.width, page.height) == (595.0, 842.0)

    page = Page(0, -5)
    assert (page.w, page.h) == (1, 1)

    page = Page(595.3, 841.9)
    out = io.BytesIO()
    page.fabricate(DocumentType.PS, out)
    assert b"%%PageBoundingBox: 0 0 596 842\n" in out.getvalue()
    assert b"<< /PageSize [595.3 841.9] >> setpagedevice\n" in out.getvalue()

def test_page_label():
    out = io.BytesIO()
    Page(10, 10, label="Cover").fabricate(DocumentType.PS, out, 1)
    assert out.getvalue().startswith(b"%%Page: (Cover) 1\n")

def test_page_is_append_only_buffer():
    page = Page(100, 100)
    page.add("0 0 moveto")
    page.add(b"(a) show\n")
    page.add(Rect(0, 0, 1, 1))

    assert bytes(page.buffer).startswith(b"0 0 moveto\n(a) show\nnewpath\n")

    with pytest.raises(TypeError):
        page.add(42)

def test_eps_page_is_commands_only():
    out = io.BytesIO()
    red_square_page().fabricate(DocumentType.EPS, out)
    assert out.getvalue() == RED_SQUARE

def test_comments():
    assert bytes(Comment("EOF")) == b"%%EOF\n"
    assert bytes(Comment("Pages", 3)) == b"%%Pages: 3\n"
    assert bytes(Comment("Page", ( 1, 1, ))) == b"%%Page: 1 1\n"
    with pytest.raises(TypeError):
        Comment("Pages", object())
