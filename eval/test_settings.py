"""Tests for the JSON settings file."""
import json
import logging
import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from galogger.errors import NotFoundError, ValidationError
from galogger.settings import (
    DEFAULT_SETTINGS_PATH,
    delete_settings,
    load_raw,
    load_settings,
    save_settings,
    settings_path,
)


def test_load_missing_file(tmp_path):
    with pytest.raises(NotFoundError) as exc:
        load_settings(str(tmp_path / "missing.json"))
    assert "missing.json" in exc.value.path


def test_save_then_load(tmp_path):
    path = str(tmp_path / "galog.json")
    save_settings(path, tracking_id="UA-1-1", hostname="www.foo.com", consent=True)
    settings = load_settings(path)
    assert settings.tracking_id == "UA-1-1"
    assert settings.hostname == "www.foo.com"
    assert settings.consent is True


def test_save_merges_with_new_keys_winning(tmp_path):
    path = str(tmp_path / "galog.json")
    save_settings(path, tracking_id="UA-1-1", hostname="a.com")
    merged = save_settings(path, hostname="b.com", consent=False)
    assert merged == {"tracking_id": "UA-1-1", "hostname": "b.com", "consent": False}
    assert load_raw(path) == merged


def test_save_rewrites_whole_file(tmp_path):
    path = tmp_path / "galog.json"
    save_settings(str(path), tracking_id="UA-1-1")
    save_settings(str(path), tracking_id="UA-2-2")
    assert json.loads(path.read_text(encoding="utf-8")) == {"tracking_id": "UA-2-2"}


def test_unknown_keys_survive(tmp_path):
    path = str(tmp_path / "galog.json")
    save_settings(path, tracking_id="UA-1-1", team="datascience")
    settings = load_settings(path)
    assert settings.extra == {"team": "datascience"}
    assert settings.to_dict()["team"] == "datascience"


def test_missing_hostname_uses_default(tmp_path):
    path = str(tmp_path / "galog.json")
    save_settings(path, tracking_id="UA-1-1")
    assert load_settings(path).hostname == "Google.com"


def test_boxed_scalars_are_unwrapped(tmp_path):
    path = tmp_path / "galog.json"
    path.write_text('{"tracking_id": ["UA-9-9"], "consent": [true]}', encoding="utf-8")
    settings = load_settings(str(path))
    assert settings.tracking_id == "UA-9-9"
    assert settings.consent is True


def test_invalid_documents(tmp_path):
    bad_json = tmp_path / "bad.json"
    bad_json.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValidationError):
        load_settings(str(bad_json))

    not_object = tmp_path / "list.json"
    not_object.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ValidationError):
        load_settings(str(not_object))


def test_delete(tmp_path):
    path = tmp_path / "galog.json"
    save_settings(str(path), tracking_id="UA-1-1")
    assert delete_settings(str(path)) is True
    assert not path.exists()


def test_delete_missing_is_not_an_error(tmp_path):
    assert delete_settings(str(tmp_path / "missing.json")) is False


def test_settings_path_resolution(tmp_path, monkeypatch):
    monkeypatch.delenv("GALOG_SETTINGS", raising=False)
    assert settings_path() == os.path.expanduser(DEFAULT_SETTINGS_PATH)

    target = tmp_path / "env.json"
    monkeypatch.setenv("GALOG_SETTINGS", str(target))
    assert settings_path() == str(target)
    save_settings(tracking_id="UA-3-3")
    assert load_settings().tracking_id == "UA-3-3"
    assert settings_path("explicit.json") == "explicit.json"


def test_list_values_of_unknown_keys_round_trip(tmp_path):
    path = str(tmp_path / "galog.json")
    save_settings(path, tracking_id="UA-1-1", tags=["a"])
    assert load_raw(path)["tags"] == ["a"]
    assert load_settings(path).extra == {"tags": ["a"]}

    save_settings(path, hostname="x.com")
    assert load_raw(path) == {"tracking_id": "UA-1-1", "tags": ["a"], "hostname": "x.com"}


def test_file_that_is_not_utf8(tmp_path):
    path = tmp_path / "galog.json"
    path.write_bytes(b'{"tracking_id": "\xff\xfe"}')
    with pytest.raises(ValidationError):
        load_settings(str(path))


def test_unknown_keys_are_logged(tmp_path, caplog):
    path = str(tmp_path / "galog.json")
    save_settings(path, tracking_id="UA-1-1", team="datascience")
    with caplog.at_level(logging.DEBUG, logger="galogger.settings"):
        load_settings(path)
    assert "Unknown settings keys kept as-is: ['team']" in caplog.text
