import customtkinter as ctk

from wallpaper_studio.config_manager import WallpaperSettings
from wallpaper_studio.controllers.app_controller import AppController
from wallpaper_studio.ui.image_viewer import ImageViewer
from wallpaper_studio.ui.sidebar import Sidebar


class WallpaperStudioApp(ctk.CTk):
    def __init__(self, settings: WallpaperSettings) -> None:
        super().__init__()
        ctk.set_appearance_mode("system")
        ctk.set_default_color_theme("green")

        self.title("Pixel Wallpaper Studio")
        self.minsize(900, 600)

        # root layout: source | wallpaper | sidebar
        self.grid_columnconfigure(0, weight=1)
        self.grid_columnconfigure(1, weight=1)
        self.grid_rowconfigure(0, weight=1)

        self._source_viewer = ImageViewer(self, title="Исходник", placeholder="Выберите NFT-файл")
        self._source_viewer.grid(row=0, column=0, sticky="nsew", padx=(12, 6), pady=12)

        self._result_viewer = ImageViewer(
            self,
            title=f"Обои {settings.target_width}×{settings.target_height}",
            placeholder="Здесь появится результат",
        )
        self._result_viewer.grid(row=0, column=1, sticky="nsew", padx=6, pady=12)

        self._sidebar = Sidebar(self, target_size=(settings.target_width, settings.target_height))
        self._sidebar.grid(row=0, column=2, sticky="ns", padx=(6, 12), pady=12)

        self._controller = AppController(
            source_viewer=self._source_viewer,
            result_viewer=self._result_viewer,
            sidebar=self._sidebar,
            window=self,
            settings=settings,
        )
        self._controller.bind_events()
