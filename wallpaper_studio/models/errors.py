"""Исключения предметной области.

Каждое исключение несёт два текста:
- `str(exc)` — техническая деталь для лога;
- `user_message` — короткое сообщение, которое можно показать пользователю.
"""
from __future__ import annotations

from typing import Optional


class WallpaperError(Exception):
    """Базовая ошибка генерации обоев."""

    default_user_message = "Не удалось обработать изображение."

    def __init__(self, message: str, user_message: Optional[str] = None) -> None:
        super().__init__(message)
        self.user_message = user_message or self.default_user_message


class InvalidInputError(WallpaperError):
    """Файл не является изображением (или не распознан как изображение)."""

    default_user_message = "Пожалуйста, загрузите корректный файл изображения."


class DecodeError(WallpaperError):
    """Данные изображения повреждены или не читаются."""

    default_user_message = "Изображение повреждено или не может быть прочитано."


class RenderError(WallpaperError):
    """Не удалось создать, отрисовать или закодировать итоговую поверхность."""

    default_user_message = (
        "Восстановление не удалось. Убедитесь, что изображение соответствует требованиям pixel-art."
    )


class DegenerateScaleError(WallpaperError):
    """Исходник шире целевой ширины: целочисленный масштаб получился бы нулевым."""

    def __init__(self, source_width: int, target_width: int) -> None:
        self.source_width = source_width
        self.target_width = target_width
        super().__init__(
            f"source width {source_width}px exceeds target width {target_width}px",
            user_message=(
                f"Изображение слишком широкое ({source_width}px): "
                f"ширина не должна превышать {target_width}px."
            ),
        )


class ExportError(WallpaperError):
    """Не удалось записать итоговый файл."""

    default_user_message = "Не удалось сохранить обои."
