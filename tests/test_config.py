from pathlib import Path

import pytest

from iconify_svg import DEFAULT_BASE_URL, IconifyConfig, ResolverMode


def test_defaults() -> None:
    config = IconifyConfig.from_env({})
    assert config == IconifyConfig()
    assert config.base_url == DEFAULT_BASE_URL
    assert config.mode is ResolverMode.LIVE
    assert config.uses_cache


def test_environment_overrides() -> None:
    config = IconifyConfig.from_env(
        {
            "ICONIFY_URL": "http://localhost:3000",
            "ICONIFY_CACHE_DIR": "/tmp/icon-cache",
            "ICONIFY_OFFLINE_DIR": "/tmp/icons",
        }
    )
    assert config.base_url == "http://localhost:3000"
    assert config.cache_root() == Path("/tmp/icon-cache")
    assert config.offline_root() == Path("/tmp/icons")


@pytest.mark.parametrize(
    "environ, offline, mode",
    [
        ({}, None, ResolverMode.LIVE),
        ({"ICONIFY_PREPARE": "true"}, None, ResolverMode.LIVE),
        ({"ICONIFY_OFFLINE": "true"}, None, ResolverMode.OFFLINE_SERVE),
        ({"ICONIFY_OFFLINE": "TRUE", "ICONIFY_PREPARE": "true"}, None, ResolverMode.OFFLINE_PREPARE),
        ({"ICONIFY_OFFLINE": "true", "ICONIFY_PREPARE": "1"}, None, ResolverMode.OFFLINE_SERVE),
        ({"ICONIFY_OFFLINE": "yes"}, None, ResolverMode.LIVE),
        ({}, True, ResolverMode.OFFLINE_SERVE),
        ({"ICONIFY_PREPARE": "true"}, True, ResolverMode.OFFLINE_PREPARE),
        ({"ICONIFY_OFFLINE": "true"}, False, ResolverMode.LIVE),
    ],
)
def test_mode_selection(environ, offline, mode: ResolverMode) -> None:
    assert IconifyConfig.from_env(environ, offline=offline).mode is mode


def test_reads_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ICONIFY_URL", "https://icons.example.com")
    monkeypatch.setenv("ICONIFY_NO_CACHE", "true")
    config = IconifyConfig.from_env()
    assert config.base_url == "https://icons.example.com"
    assert not config.cache_enabled
    assert not config.uses_cache


def test_empty_values_are_ignored() -> None:
    config = IconifyConfig.from_env({"ICONIFY_URL": "", "ICONIFY_CACHE_DIR": ""})
    assert config.base_url == DEFAULT_BASE_URL
    assert config.cache_dir is None


def test_keyword_overrides_win() -> None:
    config = IconifyConfig.from_env(
        {"ICONIFY_URL": "http://a"}, base_url="http://b", timeout=3.0
    )
    assert config.base_url == "http://b"
    assert config.timeout == 3.0


def test_default_cache_root_is_namespaced() -> None:
    assert "iconify-svg" in IconifyConfig().cache_root().parts


def test_default_offline_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    assert IconifyConfig(project_root=tmp_path).offline_root() == tmp_path / "icons"
    monkeypatch.chdir(tmp_path)
    assert IconifyConfig().offline_root() == tmp_path / "icons"


def test_serving_offline_never_uses_cache() -> None:
    assert not IconifyConfig(mode=ResolverMode.OFFLINE_SERVE).uses_cache
    assert IconifyConfig(mode=ResolverMode.OFFLINE_PREPARE).uses_cache
