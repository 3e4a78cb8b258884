"""
Тесты загрузки и сохранения настроек.
"""

import json

from wallpaper_studio.config_manager import ConfigManager, WallpaperSettings


def test_defaults_when_file_missing(tmp_path):
    settings = ConfigManager(tmp_path / "missing.json").load()

    assert settings == WallpaperSettings()
    assert (settings.target_width, settings.target_height) == (1170, 2532)
    assert settings.processing_delay_ms == 0
    assert settings.filename_prefix == "bytepepe_wallpaper"


def test_loads_values(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps(
            {
                "target_width": 1080,
                "target_height": 1920,
                "processing_delay_ms": 1500,
                "output_dir": str(tmp_path),
                "filename_prefix": "pepe",
            }
        )
    )

    settings = ConfigManager(path).load()

    assert settings.target_width == 1080
    assert settings.target_height == 1920
    assert settings.processing_delay_ms == 1500
    assert settings.output_dir == str(tmp_path)
    assert settings.filename_prefix == "pepe"


def test_invalid_values_fall_back_to_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps({"target_width": 0, "target_height": "tall", "processing_delay_ms": -1, "filename_prefix": ""})
    )

    settings = ConfigManager(path).load()

    assert settings.target_width == 1170
    assert settings.target_height == 2532
    assert settings.processing_delay_ms == 0
    assert settings.filename_prefix == "bytepepe_wallpaper"


def test_broken_json_gives_defaults(tmp_path, caplog):
    path = tmp_path / "config.json"
    path.write_text("{not json")

    assert ConfigManager(path).load() == WallpaperSettings()
    assert "Could not load config" in caplog.text


def test_non_object_json_gives_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("[1, 2, 3]")

    assert ConfigManager(path).load() == WallpaperSettings()


def test_save_then_load(tmp_path):
    path = tmp_path / "config.json"
    manager = ConfigManager(path)
    settings = WallpaperSettings(target_width=750, target_height=1334, output_dir=str(tmp_path))

    ok, error = manager.save(settings)

    assert ok and error is None
    assert manager.load() == settings


def test_save_failure_is_reported(tmp_path):
    ok, error = ConfigManager(tmp_path / "missing_dir" / "config.json").save(WallpaperSettings())

    assert not ok
    assert error
