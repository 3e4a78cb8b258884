"""Точка входа в приложение."""
import logging

from wallpaper_studio.app import WallpaperStudioApp
from wallpaper_studio.config_manager import ConfigManager


def main() -> None:
    """Настраивает логирование, читает настройки и запускает главное окно."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    settings = ConfigManager().load()
    app = WallpaperStudioApp(settings)
    app.mainloop()


if __name__ == "__main__":
    main()
