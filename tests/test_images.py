import pytest

from PIL import Image as PILImage

from pslib.images import ImageRegistry, RawImage
from pslib.procedures import ProcedureRegistry

@pytest.fixture
def red_png(tmp_path):
    path = tmp_path / "red.png"
    PILImage.new("RGB", (4, 2), (255, 0, 0)).save(path)
    return path

@pytest.fixture
def grey_png(tmp_path):
    path = tmp_path / "grey.png"
    PILImage.new("L", (1, 1), 255).save(path)
    return path

def test_each_registration_gets_a_new_name(red_png):
    registry = ImageRegistry()
    first = registry.add(red_png)
    second = registry.add(red_png)

    assert first.procedure_name == "image1"
    assert second.procedure_name == "image2"
    assert registry.get_procedure_id(red_png) == "image2"
    assert len(registry) == 2

def test_counter_is_per_registry(red_png):
    ImageRegistry().add(red_png)
    assert ImageRegistry().add(red_png).procedure_name == "image1"

def test_unknown_identity(red_png, tmp_path):
    registry = ImageRegistry()
    registry.add(red_png)
    assert registry.get_procedure_id(tmp_path / "blue.png") is None
    assert registry.get_procedure_id(str(red_png)) == "image1"

def test_raw_image_reads_size(red_png):
    raw = RawImage(red_png, "image7")
    assert (raw.width, raw.height) == (4, 2)
    assert raw.file_name == "red.png"

def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        ImageRegistry().add(tmp_path / "nothing.png")

def test_unreadable_files_use_no_number(red_png, tmp_path):
    registry = ImageRegistry()
    with pytest.raises(FileNotFoundError):
        registry.add(tmp_path / "nothing.png")

    assert registry.add(red_png).procedure_name == "image1"
    assert len(registry) == 1

def test_procedure(red_png):
    registry = ImageRegistry()
    procedure = registry.add(red_png).procedure()

    assert procedure.name == "image1"
    lines = procedure.body.splitlines()
    assert lines[0] == (b"/image1Data currentfile /ASCIIHexDecode filter "
                        b"/ReusableStreamDecode filter")
    assert lines[1] == b"ff0000" * 8
    assert lines[2:5] == [ b">", b"def", b"/image1 {", ]
    assert b"4 2 8 [ 4 0 0 -2 0 2 ]" in lines
    assert lines[-2:] == [ b"false 3 colorimage", b"} bind def", ]

def test_procedure_converts_to_rgb(grey_png):
    procedure = ImageRegistry().add(grey_png).procedure()
    assert procedure.body.splitlines()[1] == b"ffffff"

def test_load_into(red_png, grey_png):
    images = ImageRegistry()
    images.add(red_png)
    images.add(grey_png)

    registry = images.load_into(ProcedureRegistry.with_builtins())
    assert registry.names() == [ "rect", "line", "image1", "image2", ]
