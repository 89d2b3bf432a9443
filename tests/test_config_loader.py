import pytest
from pydantic import ValidationError

from catalog.utils.config_loader import PROJECT_ROOT, load_catalog_config


def test_repository_config_loads():
    cfg = load_catalog_config(env={})
    assert cfg.api.base_url == "http://localhost:3033"
    assert cfg.local_data.enabled is False
    assert cfg.views.default_sort == "alphabetical"
    assert cfg.local_data.resolved_path() == PROJECT_ROOT / "data" / "products.json"


def test_environment_overrides_file(tmp_path):
    path = tmp_path / "catalog.yml"
    path.write_text("api:\n  base_url: http://file.test\n", encoding="utf-8")
    cfg = load_catalog_config(
        path,
        env={
            "CATALOG_API_URL": "http://env.test",
            "CATALOG_API_TIMEOUT": "2.5",
            "CATALOG_USE_LOCAL_DATA": "yes",
            "CATALOG_LOCAL_DATA_PATH": str(tmp_path / "p.json"),
        },
    )
    assert cfg.api.base_url == "http://env.test"
    assert cfg.api.timeout_seconds == 2.5
    assert cfg.local_data.enabled is True
    assert cfg.local_data.resolved_path() == tmp_path / "p.json"


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "empty.yml"
    path.write_text("", encoding="utf-8")
    cfg = load_catalog_config(path, env={})
    assert cfg.api.timeout_seconds == 10.0
    assert cfg.views.default_sort == "alphabetical"


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_catalog_config(tmp_path / "nope.yml", env={})


def test_invalid_values_raise(tmp_path):
    path = tmp_path / "bad.yml"
    path.write_text("views:\n  default_sort: price\n", encoding="utf-8")
    with pytest.raises(ValidationError):
        load_catalog_config(path, env={})
