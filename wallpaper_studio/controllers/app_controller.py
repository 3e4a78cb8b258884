"""Контроллер приложения: оркестрация UI и сервисов.

SOLID:
- SRP: класс управляет связями между UI и сервисами (без логики обработки изображений).
- DIP: зависит от сервисов как от абстрактных ролей; конкретные реализации инкапсулированы.
Clean Code:
- Обработчики компактны; тяжёлая логика вынесена в сервисы.
- Состояние сессии неизменяемо и заменяется целиком при каждом переходе.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from tkinter import filedialog, TclError

import customtkinter as ctk

from wallpaper_studio.config_manager import WallpaperSettings
from wallpaper_studio.models.errors import WallpaperError
from wallpaper_studio.models.image_model import SourceImage
from wallpaper_studio.models.session_model import SessionState
from wallpaper_studio.services.export_service import ExportService
from wallpaper_studio.services.image_service import ImageService
from wallpaper_studio.services.wallpaper_service import WallpaperService
from wallpaper_studio.ui.image_viewer import ImageViewer
from wallpaper_studio.ui.sidebar import Sidebar

logger = logging.getLogger(__name__)


@dataclass
class AppController:
    """Связывает элементы UI с прикладной логикой.

    Ответственности:
    - Инициализация и бинд событий (UI -> контроллер).
    - Загрузка изображений через `ImageService`.
    - Генерация обоев через `WallpaperService` и сохранение через `ExportService`.
    - Синхронизация UI с текущим `SessionState`.
    """
    source_viewer: ImageViewer
    result_viewer: ImageViewer
    sidebar: Sidebar
    window: ctk.CTk
    settings: WallpaperSettings

    _image_service: ImageService = field(default_factory=ImageService)
    _export_service: ExportService = field(default_factory=ExportService)
    _wallpaper_service: WallpaperService | None = None
    _state: SessionState = field(default_factory=SessionState.empty)

    def __post_init__(self) -> None:
        if self._wallpaper_service is None:
            self._wallpaper_service = WallpaperService(self.settings.target_width, self.settings.target_height)

    def bind_events(self) -> None:
        """Регистрирует обработчики событий между UI-компонентами."""
        self.sidebar.on_open_file = self._handle_open_file
        self.sidebar.on_generate = self._handle_generate
        self.sidebar.on_download = self._handle_download
        self.sidebar.on_reset = self._handle_reset
        self._sync_ui()

    @property
    def state(self) -> SessionState:
        return self._state

    # ---- Handlers ----
    def _handle_open_file(self) -> None:
        try:
            file_path = filedialog.askopenfilename(
                title="Выберите изображение",
                filetypes=(
                    ("Images", "*.png *.jpg *.jpeg *.bmp *.gif *.webp"),
                    ("All files", "*.*"),
                ),
            )
        except TclError:
            logger.warning("File dialog could not be opened")
            return

        if not file_path:
            return

        try:
            source = self._image_service.load_image(file_path)
        except WallpaperError as exc:
            logger.error(f"Rejected {file_path}: {exc}")
            self._set_state(self._state.with_error(exc.user_message))
            return

        self._set_state(self._state.with_source(source))

    def _handle_generate(self) -> None:
        if not self._state.can_process:
            return
        source = self._state.source
        self._set_state(self._state.start_processing())

        delay = self.settings.processing_delay_ms
        if delay > 0:
            self.window.after(delay, lambda: self._run_transform(source))
        else:
            self._run_transform(source)

    def _handle_download(self) -> None:
        result = self._state.result
        if result is None:
            return
        try:
            saved = self._export_service.save_wallpaper(
                result, self.settings.output_dir, prefix=self.settings.filename_prefix
            )
        except WallpaperError as exc:
            logger.error(f"Export failed: {exc}")
            self._set_state(self._state.with_error(exc.user_message))
            return
        self.sidebar.set_status(f"Сохранено: {saved}")

    def _handle_reset(self) -> None:
        self._set_state(self._state.reset())

    # ---- Helpers ----
    def _run_transform(self, source: SourceImage) -> None:
        # сессию могли сбросить или сменить исходник, пока шла пауза
        if not self._state.is_processing or self._state.source is not source:
            logger.debug("Discarding stale transform request")
            return
        try:
            result = self._wallpaper_service.render(source)
        except WallpaperError as exc:
            logger.error(f"Wallpaper generation failed for {source.name}: {exc}")
            self._set_state(self._state.with_error(exc.user_message))
            return
        self._set_state(self._state.with_result(result))

    def _set_state(self, state: SessionState) -> None:
        previous = self._state
        self._state = state
        self._sync_ui(previous)

    def _sync_ui(self, previous: SessionState | None = None) -> None:
        """Перерисовывает только то, что изменилось между состояниями."""
        state = self._state
        if previous is None or previous.source is not state.source:
            self.source_viewer.set_image(state.source.pil_image if state.source else None)
            self.sidebar.set_image_info(state.source)
        if previous is None or previous.result is not state.result:
            result = state.result
            self.result_viewer.set_image(result.to_pil() if result else None)
            self.sidebar.set_sampled_color(result.sampled_color if result else None)
            self.sidebar.set_status("")

        self.sidebar.set_error(state.error)
        if state.is_processing:
            self.sidebar.set_status("Обработка…")
        elif previous is not None and previous.is_processing:
            self.sidebar.set_status("")
        self.sidebar.set_actions_state(
            can_generate=state.can_process,
            can_download=state.can_download,
            busy=state.is_processing,
        )
