from PIL import Image

from savewatch.ocr import OCR


def _two_tone():
    image = Image.new("RGB", (4, 2), (255, 255, 255))
    for y in range(2):
        for x in range(2):
            image.putpixel((x, y), (0, 0, 0))
    return image


def test_preprocess_doubles_size():
    out = OCR().preprocess(_two_tone())
    assert out.size == (8, 4)


def test_preprocess_inverts_binary():
    out = OCR().preprocess(_two_tone())
    assert out.getpixel((0, 0)) == 255
    assert out.getpixel((7, 3)) == 0
    assert set(out.getdata()) == {0, 255}


def test_empty_image_gives_empty_text():
    assert OCR(executable="no-such-program-here").recognize(Image.new("RGB", (0, 0))) == ""