"""
Конфигурация pytest: общие фикстуры и синтетические изображения в памяти.
"""

import io

import pytest
from PIL import Image


def make_image(width, height, color=(10, 20, 30, 255), mode="RGBA"):
    """Однотонное изображение заданного размера."""
    if mode == "RGB":
        color = color[:3]
    return Image.new(mode, (width, height), color)


def to_png_bytes(image):
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def probe_image():
    """Изображение 30x30, где только пиксель-проба (22, 0) имеет особый цвет."""
    image = make_image(30, 30, (200, 200, 200, 255))
    image.putpixel((22, 0), (255, 0, 128, 255))
    return image


@pytest.fixture
def sprite_image():
    """Спрайт 4x3: синий, зелёная проба (0, 0), красный пиксель внизу слева, один прозрачный."""
    image = make_image(4, 3, (0, 0, 255, 255))
    image.putpixel((0, 0), (0, 255, 0, 255))
    image.putpixel((0, 2), (255, 0, 0, 255))
    image.putpixel((1, 1), (0, 0, 0, 0))
    return image


@pytest.fixture
def png_bytes(probe_image):
    return to_png_bytes(probe_image)
