"""Сохранение готовых обоев на диск под уникальным именем."""
from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Callable, Optional

from wallpaper_studio.models.errors import ExportError
from wallpaper_studio.models.image_model import ProcessingResult

logger = logging.getLogger(__name__)

DEFAULT_PREFIX = "bytepepe_wallpaper"


def build_filename(prefix: str = DEFAULT_PREFIX, timestamp_ms: Optional[int] = None) -> str:
    """Имя вида `<prefix>_<миллисекунды epoch>.png`."""
    if timestamp_ms is None:
        timestamp_ms = int(time.time() * 1000)
    return f"{prefix}_{timestamp_ms}.png"


class ExportService:
    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock

    def save_wallpaper(
        self,
        result: ProcessingResult,
        directory: str | Path,
        prefix: str = DEFAULT_PREFIX,
    ) -> Path:
        """Записывает PNG-байты результата в `directory`.

        Если файл с таким именем уже есть, к имени добавляется `_1`, `_2`, ...

        Raises:
            ExportError: если каталог не создаётся или файл не записывается.
        """
        folder = Path(directory).expanduser()
        name = build_filename(prefix, int(self._clock() * 1000))
        target = folder / name
        counter = 1
        while target.exists():
            target = folder / f"{Path(name).stem}_{counter}.png"
            counter += 1

        try:
            folder.mkdir(parents=True, exist_ok=True)
            # "xb": существующий файл никогда не перезаписывается
            with open(target, "xb") as f:
                f.write(result.rendered_image)
        except OSError as exc:
            raise ExportError(f"cannot write {target}: {exc}") from exc

        logger.info(f"Saved wallpaper to {target} ({len(result.rendered_image)} bytes)")
        return target
