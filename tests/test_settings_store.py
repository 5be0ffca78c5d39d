import json
import math

from src.core.models import AppSettings
from src.core.settings_store import SettingsStore


DEFAULTS = (0.92, False, 60.0, 60.0)


def _as_tuple(s: AppSettings):
    return (s.opacity, s.is_pinned, s.window_left, s.window_top)


def test_load_missing_file_returns_defaults(tmp_path):
    store = SettingsStore(settings_path=str(tmp_path / "nope" / "settings.json"))
    assert _as_tuple(store.load()) == DEFAULTS


def test_load_corrupt_file_returns_defaults(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("{ not json", encoding="utf-8")
    assert _as_tuple(SettingsStore(settings_path=str(path)).load()) == DEFAULTS


def test_load_wrong_types_returns_defaults(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"Opacity": "high", "IsPinned": True}), encoding="utf-8")
    assert _as_tuple(SettingsStore(settings_path=str(path)).load()) == DEFAULTS

    path.write_text(json.dumps([1, 2, 3]), encoding="utf-8")
    assert _as_tuple(SettingsStore(settings_path=str(path)).load()) == DEFAULTS


def test_load_missing_keys_take_defaults(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"IsPinned": True}), encoding="utf-8")
    assert _as_tuple(SettingsStore(settings_path=str(path)).load()) == (0.92, True, 60.0, 60.0)


def test_save_then_load_round_trips_in_range_values(tmp_path):
    store = SettingsStore(settings_path=str(tmp_path / "settings.json"))
    original = AppSettings(opacity=0.37, is_pinned=True, window_left=-1234.5, window_top=987.25)
    store.save(original)
    assert _as_tuple(store.load()) == _as_tuple(original)


def test_save_clamps_opacity_and_replaces_non_finite_position(tmp_path):
    store = SettingsStore(settings_path=str(tmp_path / "settings.json"))
    store.save(AppSettings(opacity=1.5, is_pinned=False, window_left=math.nan, window_top=math.inf))
    loaded = store.load()
    assert loaded.opacity == 1.0
    assert loaded.window_left == 60.0
    assert loaded.window_top == 60.0

    store.save(AppSettings(opacity=0.05))
    assert store.load().opacity == 0.2


def test_load_sanitizes_values_written_by_hand(tmp_path):
    path = tmp_path / "settings.json"
    # Python's json accepts NaN/Infinity literals, so they can reach the loader.
    path.write_text('{"Opacity": 7, "IsPinned": false, "WindowLeft": NaN, "WindowTop": 15}', encoding="utf-8")
    loaded = SettingsStore(settings_path=str(path)).load()
    assert loaded.opacity == 1.0
    assert loaded.window_left == 60.0
    assert loaded.window_top == 15.0


def test_load_clamps_infinite_opacity_and_defaults_nan(tmp_path):
    path = tmp_path / "settings.json"
    store = SettingsStore(settings_path=str(path))

    path.write_text('{"Opacity": Infinity, "IsPinned": false, "WindowLeft": 1, "WindowTop": 2}', encoding="utf-8")
    assert store.load().opacity == 1.0

    path.write_text('{"Opacity": -Infinity, "IsPinned": false, "WindowLeft": 1, "WindowTop": 2}', encoding="utf-8")
    assert store.load().opacity == 0.2

    path.write_text('{"Opacity": NaN, "IsPinned": false, "WindowLeft": 1, "WindowTop": 2}', encoding="utf-8")
    assert store.load().opacity == 0.92


def test_save_creates_directory_and_writes_pretty_json(tmp_path):
    path = tmp_path / "ShortcutHUD" / "settings.json"
    SettingsStore(settings_path=str(path)).save(AppSettings(opacity=0.5, is_pinned=True, window_left=10, window_top=20))

    text = path.read_text(encoding="utf-8")
    assert "\n  " in text
    assert json.loads(text) == {"Opacity": 0.5, "IsPinned": True, "WindowLeft": 10.0, "WindowTop": 20.0}


def test_save_does_not_mutate_caller_settings(tmp_path):
    settings = AppSettings(opacity=3.0, window_left=math.nan)
    SettingsStore(settings_path=str(tmp_path / "settings.json")).save(settings)
    assert settings.opacity == 3.0
    assert math.isnan(settings.window_left)


def test_save_swallows_io_errors(tmp_path):
    # The target path is a directory, so opening it for writing fails.
    target = tmp_path / "settings.json"
    target.mkdir()
    SettingsStore(settings_path=str(target)).save(AppSettings())


def test_default_path_is_per_user_app_folder():
    path = SettingsStore.default_settings_path()
    assert path.endswith("settings.json")
    assert "ShortcutHUD" in path
