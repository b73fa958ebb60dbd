from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Garante que o pacote records_api seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from records_api.core import config as core_config  # noqa: E402


@pytest.fixture()
def clean_env(monkeypatch):
    for name in ("APP_ENV", "PROJECT_DIR", "USER_STORAGE_PATH", "PAGE_SIZE_DEFAULT", "PAGE_SIZE_MAX", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    core_config.get_settings.cache_clear()
    yield monkeypatch
    core_config.get_settings.cache_clear()


def test_defaults_point_at_project_data_dir(clean_env):
    settings = core_config.get_settings()
    assert settings.app_env == "dev"
    assert settings.default_page_size == 10
    assert settings.max_page_size == 100
    assert settings.log_level == "INFO"
    assert settings.resolved_storage_path == core_config.PROJECT_ROOT / "data" / "user.json"


def test_relative_storage_path_is_joined_to_project_dir(clean_env, tmp_path):
    clean_env.setenv("PROJECT_DIR", str(tmp_path))
    clean_env.setenv("USER_STORAGE_PATH", "var/people.json")
    settings = core_config.get_settings()
    assert settings.resolved_storage_path == tmp_path / "var" / "people.json"


def test_absolute_storage_path_is_used_as_is(clean_env, tmp_path):
    target = tmp_path / "abs.json"
    clean_env.setenv("PROJECT_DIR", "/somewhere/else")
    clean_env.setenv("USER_STORAGE_PATH", str(target))
    assert core_config.get_settings().resolved_storage_path == target


def test_invalid_page_sizes_fall_back_to_defaults(clean_env):
    clean_env.setenv("PAGE_SIZE_DEFAULT", "abc")
    clean_env.setenv("PAGE_SIZE_MAX", "-5")
    settings = core_config.get_settings()
    assert settings.default_page_size == 10
    assert settings.max_page_size == 100


def test_max_page_size_never_below_default(clean_env):
    clean_env.setenv("PAGE_SIZE_DEFAULT", "50")
    clean_env.setenv("PAGE_SIZE_MAX", "20")
    settings = core_config.get_settings()
    assert settings.max_page_size == 50


def test_settings_are_cached(clean_env):
    assert core_config.get_settings() is core_config.get_settings()
