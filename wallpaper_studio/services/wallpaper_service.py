"""Генерация обоев из pixel-art: выбор цвета фона, заливка, целочисленное
увеличение ближайшим соседом и размещение арта у нижнего края.

Все функции чистые: нет общего состояния, одинаковые входы дают одинаковый PNG.
"""
from __future__ import annotations

import io
import logging
import math
from typing import Tuple

import numpy as np
from PIL import Image

from wallpaper_studio.models.errors import DecodeError, DegenerateScaleError, RenderError
from wallpaper_studio.models.image_model import (
    DEFAULT_TARGET_HEIGHT,
    DEFAULT_TARGET_WIDTH,
    ProcessingResult,
    SampledColor,
    SourceImage,
    WallpaperLayout,
)

logger = logging.getLogger(__name__)

# Сторона квадрата-пробы в правом верхнем углу
SAMPLE_SIZE = 8


def sample_background_color(image: Image.Image) -> SampledColor:
    """Цвет пикселя (max(0, w - 8), 0).

    Берётся ровно один пиксель в углу блока 8x8, без усреднения.
    Полностью прозрачный пиксель даёт чёрный цвет.
    """
    rgba = image if image.mode == "RGBA" else image.convert("RGBA")
    x = max(0, rgba.width - SAMPLE_SIZE)
    r, g, b, a = rgba.getpixel((x, 0))
    if a == 0:
        return SampledColor(0, 0, 0)
    return SampledColor(int(r), int(g), int(b))


def compute_layout(source_size: Tuple[int, int], target_size: Tuple[int, int]) -> WallpaperLayout:
    """Масштаб и позиция арта: по центру по горизонтали, вплотную к низу.

    Raises:
        ValueError: если размеры неположительные.
        DegenerateScaleError: если исходник шире цели (масштаб был бы 0).
    """
    src_w, src_h = source_size
    target_w, target_h = target_size
    if target_w <= 0 or target_h <= 0:
        raise ValueError(f"target size must be positive, got {target_w}x{target_h}")
    if src_w <= 0 or src_h <= 0:
        raise ValueError(f"source size must be positive, got {src_w}x{src_h}")

    scale = target_w // src_w
    if scale < 1:
        raise DegenerateScaleError(src_w, target_w)

    scaled_w = src_w * scale
    scaled_h = src_h * scale
    return WallpaperLayout(
        scale=scale,
        scaled_width=scaled_w,
        scaled_height=scaled_h,
        x_pos=(target_w - scaled_w) / 2,
        y_pos=target_h - scaled_h,
    )


def upscale_nearest(image: Image.Image, scale: int) -> Image.Image:
    """Увеличение в `scale` раз повторением пикселей (без интерполяции).

    Палитровые и прочие режимы сначала переводятся в RGBA.
    """
    if image.mode not in ("RGBA", "RGB", "L"):
        image = image.convert("RGBA")
    if scale == 1:
        return image.copy()
    arr = np.asarray(image)
    out = np.repeat(np.repeat(arr, scale, axis=0), scale, axis=1)
    return Image.fromarray(out)


def crop_visible_rows(
    image: Image.Image, layout: WallpaperLayout, target_height: int
) -> Tuple[Image.Image, Tuple[int, int]]:
    """Оставляет только нижние строки исходника, которые попадут на экран.

    Returns:
        (обрезанный исходник, позиция вставки увеличенного фрагмента).
    """
    x, y = layout.paste_box
    rows = math.ceil(target_height / layout.scale)
    if image.height <= rows:
        return image, (x, y)
    cropped = image.crop((0, image.height - rows, image.width, image.height))
    return cropped, (x, target_height - rows * layout.scale)


def transform(
    source: SourceImage | Image.Image,
    target_width: int = DEFAULT_TARGET_WIDTH,
    target_height: int = DEFAULT_TARGET_HEIGHT,
) -> ProcessingResult:
    """Строит обои `target_width x target_height` из pixel-art исходника.

    Args:
        source: `SourceImage` или уже декодированное `PIL.Image.Image`.
        target_width: Ширина результата, px.
        target_height: Высота результата, px.

    Returns:
        `ProcessingResult` с PNG-байтами и метаданными.

    Raises:
        ValueError: неположительные целевые размеры.
        DecodeError: пиксели исходника не читаются.
        DegenerateScaleError: исходник шире цели.
        RenderError: не удалось создать, отрисовать или закодировать результат.
    """
    pil_source = source.pil_image if isinstance(source, SourceImage) else source
    try:
        pil_source.load()
        art = pil_source if pil_source.mode == "RGBA" else pil_source.convert("RGBA")
    except (OSError, ValueError) as exc:
        raise DecodeError(f"cannot read source pixels: {exc}") from exc

    # 1) цвет фона
    color = sample_background_color(art)

    # 4-6) масштаб и позиция
    layout = compute_layout(art.size, (target_width, target_height))

    try:
        # 2-3) поверхность, залитая цветом фона
        canvas = Image.new("RGB", (target_width, target_height), color.rgb)

        # 7) арт поверх фона; прозрачные пиксели пропускают фон
        visible, box = crop_visible_rows(art, layout, target_height)
        scaled = upscale_nearest(visible, layout.scale)
        canvas.paste(scaled.convert("RGB"), box, mask=scaled.getchannel("A"))

        # 8) PNG без потерь
        buffer = io.BytesIO()
        canvas.save(buffer, format="PNG")
    except (OSError, ValueError, MemoryError) as exc:
        raise RenderError(f"failed to render {target_width}x{target_height} wallpaper: {exc}") from exc

    logger.info(
        f"Rendered {target_width}x{target_height} wallpaper from {art.width}x{art.height} source "
        f"(scale={layout.scale}, background={color})"
    )
    return ProcessingResult(
        rendered_image=buffer.getvalue(),
        source_width=art.width,
        source_height=art.height,
        sampled_color=color,
        layout=layout,
        target_width=target_width,
        target_height=target_height,
    )


class WallpaperService:
    """Обёртка над `transform` с целевым размером из настроек."""

    def __init__(self, target_width: int = DEFAULT_TARGET_WIDTH, target_height: int = DEFAULT_TARGET_HEIGHT) -> None:
        self.target_width = target_width
        self.target_height = target_height

    def render(self, source: SourceImage) -> ProcessingResult:
        return transform(source, self.target_width, self.target_height)
