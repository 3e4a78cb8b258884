"""Модели данных для изображений и результата обработки.

Принципы:
- SRP: только структура данных, без логики обработки.
- Чистый код: неизменяемость (`frozen=True`) для предсказуемости.
"""
from __future__ import annotations

import io
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from PIL import Image

RGB = Tuple[int, int, int]

# Разрешение экрана по умолчанию (iPhone 12/13/14)
DEFAULT_TARGET_WIDTH = 1170
DEFAULT_TARGET_HEIGHT = 2532


@dataclass(frozen=True)
class SourceImage:
    """Неизменяемая модель исходного изображения и его метаданные.

    Fields:
        name: Имя файла (или иной метки источника).
        pil_image: Декодированное изображение PIL (в режиме RGBA).
        width: Ширина, px.
        height: Высота, px.
        mode: Режим исходного файла до конвертации, например "P".
        size_bytes: Размер файла, если доступен.
        path: Путь к файлу, если изображение загружено с диска.
    """
    name: str
    pil_image: Image.Image
    width: int
    height: int
    mode: str
    size_bytes: Optional[int]
    path: Optional[Path] = None

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height


@dataclass(frozen=True)
class SampledColor:
    """Цвет фона, взятый из исходника."""
    red: int
    green: int
    blue: int

    @property
    def rgb(self) -> RGB:
        return self.red, self.green, self.blue

    @property
    def hex(self) -> str:
        return f"#{self.red:02X}{self.green:02X}{self.blue:02X}"

    def __str__(self) -> str:
        return f"rgb({self.red}, {self.green}, {self.blue})"


@dataclass(frozen=True)
class WallpaperLayout:
    """Геометрия размещения арта на обоях.

    `x_pos` может быть дробным (центрирование при нечётном остатке),
    `y_pos` может быть отрицательным, если арт выше экрана.
    """
    scale: int
    scaled_width: int
    scaled_height: int
    x_pos: float
    y_pos: int

    @property
    def paste_box(self) -> Tuple[int, int]:
        """Целочисленная позиция на пиксельной сетке (пол от `x_pos`)."""
        return math.floor(self.x_pos), self.y_pos


@dataclass(frozen=True)
class ProcessingResult:
    """Результат одного вызова генерации обоев.

    Fields:
        rendered_image: PNG-байты итоговой композиции.
        source_width: Ширина исходника, px.
        source_height: Высота исходника, px.
        sampled_color: Цвет фона.
        layout: Рассчитанная геометрия размещения.
        target_width: Ширина итогового изображения, px.
        target_height: Высота итогового изображения, px.
    """
    rendered_image: bytes
    source_width: int
    source_height: int
    sampled_color: SampledColor
    layout: WallpaperLayout
    target_width: int = DEFAULT_TARGET_WIDTH
    target_height: int = DEFAULT_TARGET_HEIGHT

    def to_pil(self) -> Image.Image:
        """Декодирует PNG обратно в `PIL.Image` (для превью)."""
        image = Image.open(io.BytesIO(self.rendered_image))
        image.load()
        return image
