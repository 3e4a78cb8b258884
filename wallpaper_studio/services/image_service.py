"""Загрузка изображений (с диска или из памяти) и упаковка метаданных.

Принципы:
- SRP: класс отвечает только за проверку типа, декодирование и извлечение свойств.
- OCP: новые источники (стрим, URL) можно добавить отдельными методами.
- LSP/ISP: возвращает `SourceImage` с предсказуемыми полями; интерфейс узкий и конкретный.
"""
from __future__ import annotations

import io
import logging
import mimetypes
from pathlib import Path
from typing import Optional

from PIL import Image, UnidentifiedImageError

from wallpaper_studio.models.errors import DecodeError, InvalidInputError
from wallpaper_studio.models.image_model import SourceImage

logger = logging.getLogger(__name__)


def is_non_image_name(name: str) -> bool:
    """True, если по имени файла угадывается MIME-тип, и он не `image/*`.

    Файлы без расширения или с неизвестным расширением не отбрасываются:
    их содержимое распознаёт Pillow.
    """
    mime, _encoding = mimetypes.guess_type(name)
    return mime is not None and not mime.startswith("image/")


class ImageService:
    def load_image(self, file_path: str | Path) -> SourceImage:
        """Загружает изображение с диска и возвращает его вместе с метаданными.

        Args:
            file_path: Путь до файла изображения.

        Returns:
            `SourceImage` c `PIL.Image.Image` (в режиме RGBA), размерами, режимом и размером файла.

        Raises:
            InvalidInputError: если путь не существует или файл не является изображением.
            DecodeError: если файл не читается или данные повреждены.
        """
        path = Path(file_path)
        if not path.exists() or not path.is_file():
            raise InvalidInputError(f"file not found: {path}", user_message=f"Файл не найден: {path.name}")
        if is_non_image_name(path.name):
            raise InvalidInputError(f"not an image MIME type: {path}")

        try:
            data = path.read_bytes()
        except OSError as exc:
            raise DecodeError(f"cannot read {path}: {exc}") from exc

        source = self._decode(data, path.name, size_bytes=len(data), path=path)
        logger.info(f"Loaded {path} ({source.width}x{source.height}, {source.mode})")
        return source

    def load_image_bytes(self, data: bytes, name: Optional[str] = None) -> SourceImage:
        """Декодирует изображение из памяти.

        Если передано имя файла, тип проверяется так же, как и для файла на диске.
        """
        label = name or "<memory>"
        if name is not None and is_non_image_name(name):
            raise InvalidInputError(f"not an image MIME type: {name}")
        source = self._decode(data, label, size_bytes=len(data))
        logger.info(f"Loaded {label} from memory ({source.width}x{source.height}, {source.mode})")
        return source

    # ---- Helpers ----
    def _decode(
        self,
        data: bytes,
        name: str,
        size_bytes: Optional[int],
        path: Optional[Path] = None,
    ) -> SourceImage:
        try:
            pil_image = Image.open(io.BytesIO(data))
        except UnidentifiedImageError as exc:
            raise InvalidInputError(f"file is not a recognised image: {name}") from exc
        except (OSError, ValueError, Image.DecompressionBombError) as exc:
            raise DecodeError(f"cannot open {name}: {exc}") from exc

        original_mode = pil_image.mode
        try:
            # анимации не поддерживаются: берём только первый кадр
            frames = getattr(pil_image, "n_frames", 1)
            if frames > 1:
                logger.warning(f"{name} has {frames} frames, using the first one")
                pil_image.seek(0)
            pil_image.load()
            rgba = pil_image.convert("RGBA")
        except (OSError, ValueError, EOFError, Image.DecompressionBombError) as exc:
            raise DecodeError(f"cannot decode {name}: {exc}") from exc

        width, height = rgba.size
        if width < 1 or height < 1:
            raise DecodeError(f"image has no pixels: {name}")

        return SourceImage(
            name=name,
            pil_image=rgba,
            width=width,
            height=height,
            mode=original_mode,
            size_bytes=size_bytes,
            path=path,
        )
