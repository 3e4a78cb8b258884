"""Состояние интерактивной сессии.

Состояние не мутируется: каждый переход возвращает новую запись,
контроллер просто заменяет ссылку целиком.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from wallpaper_studio.models.image_model import ProcessingResult, SourceImage


@dataclass(frozen=True)
class SessionState:
    source: Optional[SourceImage] = None
    result: Optional[ProcessingResult] = None
    is_processing: bool = False
    error: Optional[str] = None

    @classmethod
    def empty(cls) -> "SessionState":
        return cls()

    @property
    def can_process(self) -> bool:
        return self.source is not None and not self.is_processing

    @property
    def can_download(self) -> bool:
        return self.result is not None and not self.is_processing

    def with_source(self, source: SourceImage) -> "SessionState":
        """Новый исходник: прошлый результат и ошибка сбрасываются."""
        return SessionState(source=source)

    def start_processing(self) -> "SessionState":
        return replace(self, is_processing=True, error=None)

    def with_result(self, result: ProcessingResult) -> "SessionState":
        return replace(self, result=result, is_processing=False, error=None)

    def with_error(self, message: str) -> "SessionState":
        return replace(self, is_processing=False, error=message)

    def reset(self) -> "SessionState":
        return SessionState.empty()
