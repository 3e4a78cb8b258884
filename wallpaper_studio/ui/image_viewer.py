"""Виджет просмотра изображения: вписывание в область без сглаживания.

Принципы:
- SRP: отвечает только за представление изображения.
- Чистый код: чёткое разделение публичного API и внутренних обработчиков событий.
"""
from __future__ import annotations

from typing import Optional, Tuple

import customtkinter as ctk
import tkinter as tk
from PIL import Image, ImageTk


def fit_size(image_size: Tuple[int, int], box_size: Tuple[int, int]) -> Tuple[int, int]:
    """Размер изображения, вписанного в прямоугольник с сохранением пропорций."""
    img_w, img_h = image_size
    box_w, box_h = max(1, box_size[0]), max(1, box_size[1])
    if img_w == 0 or img_h == 0:
        return 1, 1
    scale = min(box_w / img_w, box_h / img_h)
    return max(1, int(img_w * scale)), max(1, int(img_h * scale))


class ImageViewer(ctk.CTkFrame):
    """Канва с заголовком; изображение масштабируется ближайшим соседом."""
    def __init__(self, master: ctk.CTk | tk.Misc, title: str, placeholder: str = "", **kwargs) -> None:
        super().__init__(master, **kwargs)
        self.grid_rowconfigure(1, weight=1)
        self.grid_columnconfigure(0, weight=1)

        self._title = ctk.CTkLabel(self, text=title, font=ctk.CTkFont(size=14, weight="bold"))
        self._title.grid(row=0, column=0, padx=8, pady=(6, 2), sticky="w")

        self._canvas = tk.Canvas(self, highlightthickness=0, bg=self._get_canvas_bg())
        self._canvas.grid(row=1, column=0, sticky="nsew", padx=6, pady=(0, 6))

        self._placeholder = placeholder
        self._image: Optional[Image.Image] = None
        self._tk_image: Optional[ImageTk.PhotoImage] = None

        self._canvas.bind("<Configure>", self._on_canvas_resize)

    # ---- Public API ----
    def set_image(self, image: Optional[Image.Image]) -> None:
        """Устанавливает изображение (None — очистить) и перерисовывает виджет."""
        self._image = image
        self._render_image()

    # ---- Internals ----
    def _on_canvas_resize(self, _event: tk.Event) -> None:
        self._render_image()

    def _render_image(self) -> None:
        self._canvas.delete("all")
        canvas_w = int(self._canvas.winfo_width())
        canvas_h = int(self._canvas.winfo_height())

        if self._image is None:
            self._tk_image = None
            if self._placeholder:
                self._canvas.create_text(
                    canvas_w // 2, canvas_h // 2, text=self._placeholder, fill="#808080", width=max(1, canvas_w - 20)
                )
            return

        w, h = fit_size(self._image.size, (canvas_w, canvas_h))
        # pixel-art: никакого сглаживания при показе
        resized = self._image.resize((w, h), Image.Resampling.NEAREST)
        self._tk_image = ImageTk.PhotoImage(resized)
        self._canvas.create_image((canvas_w - w) // 2, (canvas_h - h) // 2, image=self._tk_image, anchor="nw")

    def _get_canvas_bg(self) -> str:
        # CTk does not expose canvas theme, so pick neutral
        return "#1f1f1f" if ctk.get_appearance_mode().lower() == "dark" else "#f2f2f2"
