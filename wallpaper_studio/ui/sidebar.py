"""Боковая панель: открытие файла, генерация, сохранение, информация об исходнике.

Принципы:
- SRP: управляет только UI, не содержит алгоритмов.
- ISP: состояние задаётся компактными методами `set_*`, события уходят через `on_*`.
"""
from __future__ import annotations

from typing import Callable, Optional

import customtkinter as ctk

from wallpaper_studio.models.image_model import SampledColor, SourceImage


def format_size(size_bytes: Optional[int]) -> str:
    if size_bytes is None:
        return "—"
    thresholds = [("Б", 1024), ("КБ", 1024**2), ("МБ", 1024**3), ("ГБ", 1024**4)]
    for label, limit in thresholds:
        if size_bytes < limit:
            if label == "Б":
                return f"{size_bytes} {label}"
            value = size_bytes / (limit // 1024)
            return f"{value:.1f} {label}"
    value = size_bytes / (1024**4)
    return f"{value:.1f} ГБ"


class Sidebar(ctk.CTkFrame):
    """Панель с блоками: исходник, действия, информация, цвет фона, ошибка."""
    def __init__(self, master: ctk.CTk, target_size: tuple[int, int], **kwargs) -> None:
        super().__init__(master, width=280, **kwargs)

        self.grid_columnconfigure(0, weight=1)

        # Callbacks
        self.on_open_file: Optional[Callable[[], None]] = None
        self.on_generate: Optional[Callable[[], None]] = None
        self.on_download: Optional[Callable[[], None]] = None
        self.on_reset: Optional[Callable[[], None]] = None

        # Source section
        self._title = ctk.CTkLabel(self, text="Исходник", font=ctk.CTkFont(size=16, weight="bold"))
        self._title.grid(row=0, column=0, padx=8, pady=(8, 4), sticky="w")

        self._hint = ctk.CTkLabel(
            self,
            text=(
                "Загрузите pixel-art NFT. Цвет фона берётся из правого верхнего блока 8×8, "
                "персонаж прижимается к нижнему краю."
            ),
            wraplength=250,
            anchor="w",
            justify="left",
        )
        self._hint.grid(row=1, column=0, padx=8, pady=(0, 8), sticky="ew")

        self._open_btn = ctk.CTkButton(self, text="Открыть изображение…", command=self._emit_open_file)
        self._open_btn.grid(row=2, column=0, padx=8, pady=(0, 6), sticky="ew")

        target_w, target_h = target_size
        self._generate_btn = ctk.CTkButton(
            self, text=f"Создать обои {target_w}×{target_h}", command=self._emit_generate, state="disabled"
        )
        self._generate_btn.grid(row=3, column=0, padx=8, pady=(0, 6), sticky="ew")

        self._download_btn = ctk.CTkButton(self, text="Скачать PNG", command=self._emit_download, state="disabled")
        self._download_btn.grid(row=4, column=0, padx=8, pady=(0, 6), sticky="ew")

        self._reset_btn = ctk.CTkButton(
            self, text="Сбросить", command=self._emit_reset, fg_color="transparent", border_width=1
        )
        self._reset_btn.grid(row=5, column=0, padx=8, pady=(0, 12), sticky="ew")

        # Info section
        self._info_title = ctk.CTkLabel(self, text="Информация", font=ctk.CTkFont(size=16, weight="bold"))
        self._info_title.grid(row=6, column=0, padx=8, pady=(8, 4), sticky="w")

        self._name_val = ctk.StringVar(value="—")
        self._size_val = ctk.StringVar(value="—")
        self._dims_val = ctk.StringVar(value="—")
        self._mode_val = ctk.StringVar(value="—")

        self._info_name = ctk.CTkLabel(self, textvariable=self._name_val, wraplength=250, anchor="w", justify="left")
        self._info_size = ctk.CTkLabel(self, textvariable=self._size_val, anchor="w", justify="left")
        self._info_dims = ctk.CTkLabel(self, textvariable=self._dims_val, anchor="w", justify="left")
        self._info_mode = ctk.CTkLabel(self, textvariable=self._mode_val, anchor="w", justify="left")

        self._info_name.grid(row=7, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._info_size.grid(row=8, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._info_dims.grid(row=9, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._info_mode.grid(row=10, column=0, padx=8, pady=(0, 10), sticky="ew")

        # Background color section
        self._color_title = ctk.CTkLabel(self, text="Цвет фона", font=ctk.CTkFont(size=16, weight="bold"))
        self._color_title.grid(row=11, column=0, padx=8, pady=(8, 4), sticky="w")

        self._color_val = ctk.StringVar(value="—")
        self._color_swatch = ctk.CTkFrame(self, height=24, corner_radius=4, fg_color="transparent", border_width=1)
        self._color_swatch.grid(row=12, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._color_label = ctk.CTkLabel(self, textvariable=self._color_val, anchor="w", justify="left")
        self._color_label.grid(row=13, column=0, padx=8, pady=(0, 10), sticky="ew")

        # Status / error
        self._status_val = ctk.StringVar(value="")
        self._status_label = ctk.CTkLabel(self, textvariable=self._status_val, wraplength=250, anchor="w", justify="left")
        self._status_label.grid(row=14, column=0, padx=8, pady=(0, 4), sticky="ew")

        self._error_val = ctk.StringVar(value="")
        self._error_label = ctk.CTkLabel(
            self, textvariable=self._error_val, text_color="#E5484D", wraplength=250, anchor="w", justify="left"
        )
        self._error_label.grid(row=15, column=0, padx=8, pady=(0, 8), sticky="ew")

        # filler
        self.grid_rowconfigure(99, weight=1)

    # ---- Public API ----
    def set_image_info(self, source: Optional[SourceImage]) -> None:
        """Отображает метаданные загруженного изображения (None — очистить)."""
        if source is None:
            for var in (self._name_val, self._size_val, self._dims_val, self._mode_val):
                var.set("—")
            return
        self._name_val.set(source.name)
        self._size_val.set(format_size(source.size_bytes))
        self._dims_val.set(f"{source.width} × {source.height} px")
        self._mode_val.set(source.mode)

    def set_sampled_color(self, color: Optional[SampledColor]) -> None:
        if color is None:
            self._color_val.set("—")
            self._color_swatch.configure(fg_color="transparent")
            return
        self._color_val.set(f"{color}  {color.hex}")
        self._color_swatch.configure(fg_color=color.hex)

    def set_actions_state(self, can_generate: bool, can_download: bool, busy: bool) -> None:
        self._generate_btn.configure(state="normal" if can_generate else "disabled")
        self._download_btn.configure(state="normal" if can_download else "disabled")
        self._open_btn.configure(state="disabled" if busy else "normal")

    def set_status(self, text: str) -> None:
        self._status_val.set(text)

    def set_error(self, message: Optional[str]) -> None:
        self._error_val.set(message or "")

    # ---- Events ----
    def _emit_open_file(self) -> None:
        if self.on_open_file:
            self.on_open_file()

    def _emit_generate(self) -> None:
        if self.on_generate:
            self.on_generate()

    def _emit_download(self) -> None:
        if self.on_download:
            self.on_download()

    def _emit_reset(self) -> None:
        if self.on_reset:
            self.on_reset()
