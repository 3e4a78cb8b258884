"""
Тесты загрузки изображений: проверка типа, декодирование, метаданные.
"""

import io
import logging

import numpy as np
import pytest
from PIL import Image

from conftest import make_image, to_png_bytes
from wallpaper_studio.models.errors import DecodeError, InvalidInputError
from wallpaper_studio.services.image_service import ImageService, is_non_image_name


@pytest.fixture
def service():
    return ImageService()


def truncated_png():
    rng = np.random.default_rng(3)
    noise = Image.fromarray(rng.integers(0, 255, size=(64, 64, 4), dtype=np.uint8))
    data = to_png_bytes(noise)
    return data[: len(data) // 2]


class TestIsNonImageName:
    @pytest.mark.parametrize("name", ["nft.png", "NFT.PNG", "art.jpg", "art.jpeg", "anim.gif", "x.bmp"])
    def test_image_extensions(self, name):
        assert not is_non_image_name(name)

    @pytest.mark.parametrize("name", ["notes.txt", "archive.zip", "page.html"])
    def test_other_types(self, name):
        assert is_non_image_name(name)

    @pytest.mark.parametrize("name", ["no_extension", "sprite.nftart"])
    def test_unknown_extension_is_left_to_decoder(self, name):
        assert not is_non_image_name(name)


class TestLoadImage:
    def test_loads_png_with_metadata(self, service, tmp_path, png_bytes):
        path = tmp_path / "pepe.png"
        path.write_bytes(png_bytes)

        source = service.load_image(path)

        assert source.name == "pepe.png"
        assert source.path == path
        assert source.size == (30, 30)
        assert source.mode == "RGBA"
        assert source.size_bytes == len(png_bytes)
        assert source.pil_image.mode == "RGBA"

    def test_palette_image_is_converted_to_rgba(self, service, tmp_path):
        path = tmp_path / "palette.png"
        make_image(8, 8, (12, 34, 56), mode="RGB").convert("P").save(path)

        source = service.load_image(str(path))

        assert source.mode == "P"
        assert source.pil_image.mode == "RGBA"

    def test_missing_file(self, service, tmp_path):
        with pytest.raises(InvalidInputError) as exc_info:
            service.load_image(tmp_path / "missing.png")

        assert "missing.png" in exc_info.value.user_message

    def test_non_image_type_is_rejected(self, service, tmp_path, png_bytes):
        path = tmp_path / "pepe.txt"
        path.write_bytes(png_bytes)

        with pytest.raises(InvalidInputError) as exc_info:
            service.load_image(path)

        assert exc_info.value.user_message == "Пожалуйста, загрузите корректный файл изображения."

    def test_garbage_with_image_extension(self, service, tmp_path):
        path = tmp_path / "fake.png"
        path.write_bytes(b"definitely not an image")

        with pytest.raises(InvalidInputError):
            service.load_image(path)

    def test_png_without_extension_is_detected_by_content(self, service, tmp_path, png_bytes):
        path = tmp_path / "pepe"
        path.write_bytes(png_bytes)

        source = service.load_image(path)

        assert source.size == (30, 30)

    def test_unknown_extension_with_non_image_content(self, service, tmp_path):
        path = tmp_path / "notes"
        path.write_text("just some text")

        with pytest.raises(InvalidInputError):
            service.load_image(path)

    def test_truncated_file_raises_decode_error(self, service, tmp_path):
        path = tmp_path / "broken.png"
        path.write_bytes(truncated_png())

        with pytest.raises(DecodeError):
            service.load_image(path)


class TestLoadImageBytes:
    def test_loads_from_memory(self, service, png_bytes):
        source = service.load_image_bytes(png_bytes, "pepe.png")

        assert source.name == "pepe.png"
        assert source.path is None
        assert source.size == (30, 30)

    def test_name_is_optional(self, service, png_bytes):
        source = service.load_image_bytes(png_bytes)

        assert source.name == "<memory>"

    def test_non_image_name_is_rejected(self, service, png_bytes):
        with pytest.raises(InvalidInputError):
            service.load_image_bytes(png_bytes, "readme.txt")

    def test_corrupt_bytes(self, service):
        with pytest.raises(DecodeError):
            service.load_image_bytes(truncated_png(), "broken.png")

    def test_animated_gif_uses_first_frame(self, service, caplog):
        frames = [make_image(6, 6, (255, 0, 0), mode="RGB"), make_image(6, 6, (0, 0, 255), mode="RGB")]
        buffer = io.BytesIO()
        frames[0].save(buffer, format="GIF", save_all=True, append_images=frames[1:])

        with caplog.at_level(logging.WARNING):
            source = service.load_image_bytes(buffer.getvalue(), "anim.gif")

        assert source.pil_image.getpixel((0, 0)) == (255, 0, 0, 255)
        assert "frames" in caplog.text
