"""Testes do ConfigStore: camadas, chaves pontuadas, conversões e trava."""

from __future__ import annotations

import pytest

from config.store import ConfigStore, expand_env, parse_flags
from utils.errors import ConfigError, ConfigLoadError, ConfigLockedError


class TestLoadExists:
    def test_missing_file_is_skipped_and_existing_is_loaded(self, tmp_path, write_file) -> None:
        existing = write_file("app.yaml", "name: demo\nlisten: ':9000'\n")
        store = ConfigStore()

        loaded = store.load_exists(str(tmp_path / "absent.yaml"), str(existing))

        assert loaded == [str(existing)]
        assert store.sources == [str(existing)]
        assert store.string("name") == "demo"
        assert store.string("listen") == ":9000"

    def test_later_files_override_only_shared_keys(self, write_file) -> None:
        base = write_file("base.yaml", "name: base\nserver:\n  host: 0.0.0.0\n  port: 8080\n")
        local = write_file("local.json", '{"server": {"port": 9090}}')
        store = ConfigStore()

        store.load_exists(base, local)

        assert store.get("name") == "base"
        assert store.get("server.host") == "0.0.0.0"
        assert store.int("server.port") == 9090

    def test_malformed_yaml_raises(self, write_file) -> None:
        broken = write_file("broken.yaml", "name: [unterminated\n")
        with pytest.raises(ConfigLoadError, match="YAML inválido"):
            ConfigStore().load_exists(broken)

    def test_malformed_json_raises(self, write_file) -> None:
        broken = write_file("broken.json", "{not json")
        with pytest.raises(ConfigLoadError):
            ConfigStore().load_exists(broken)

    def test_invalid_utf8_raises_load_error(self, tmp_path) -> None:
        binary = tmp_path / "binary.yaml"
        binary.write_bytes(b"name: \xff\xfe\n")
        with pytest.raises(ConfigLoadError):
            ConfigStore().load_exists(binary)

    def test_root_must_be_mapping(self, write_file) -> None:
        listing = write_file("list.yaml", "- a\n- b\n")
        with pytest.raises(ConfigLoadError, match="mapeamento"):
            ConfigStore().load_exists(listing)

    def test_unsupported_extension_raises(self, write_file) -> None:
        ini = write_file("app.ini", "[app]\nname=x\n")
        with pytest.raises(ConfigLoadError, match="não suportado"):
            ConfigStore().load_exists(ini)

    def test_empty_file_is_empty_layer(self, write_file) -> None:
        empty = write_file("empty.yaml", "")
        store = ConfigStore()
        assert store.load_exists(empty) == [str(empty)]
        assert store.to_dict() == {}

    def test_env_references_are_expanded(self, write_file, monkeypatch) -> None:
        monkeypatch.setenv("APPBOOT_TEST_HOST", "10.0.0.1")
        monkeypatch.delenv("APPBOOT_TEST_UNSET", raising=False)
        config = write_file(
            "env.yaml",
            "host: ${APPBOOT_TEST_HOST}\n"
            "port: ${APPBOOT_TEST_UNSET|8081}\n"
            "raw: ${APPBOOT_TEST_UNSET}\n",
        )
        store = ConfigStore()
        store.load_exists(config)

        assert store.string("host") == "10.0.0.1"
        assert store.string("port") == "8081"
        assert store.string("raw") == "${APPBOOT_TEST_UNSET}"


class TestLoadFlags:
    def test_bare_bool_flag_is_true(self) -> None:
        store = ConfigStore(data={"debug": False})
        applied = store.load_flags(["debug:bool"], ["--debug"])
        assert applied == {"debug": True}
        assert store.bool("debug") is True

    def test_flags_override_file_values(self, write_file) -> None:
        config = write_file("app.yaml", "debug: false\nname: from-file\n")
        store = ConfigStore()
        store.load_exists(config)

        store.load_flags(["debug:bool"], ["--debug=true"])

        assert store.bool("debug") is True
        assert store.string("name") == "from-file"
        assert store.sources[-1] == "flags"

    def test_absent_flag_keeps_file_value(self) -> None:
        store = ConfigStore(data={"debug": True})
        assert store.load_flags(["debug:bool"], ["--other", "x"]) == {}
        assert store.bool("debug") is True
        assert "flags" not in store.sources

    def test_typed_flags(self) -> None:
        values = parse_flags(
            ["port:int", "ratio:float", "listen", "verbose:bool"],
            ["--port", "9000", "--ratio=0.5", "--listen=:80", "--verbose=no"],
        )
        assert values == {"port": 9000, "ratio": 0.5, "listen": ":80", "verbose": False}

    def test_invalid_flag_value_raises(self) -> None:
        with pytest.raises(ConfigError, match="--debug"):
            parse_flags(["debug:bool"], ["--debug=maybe"])

    def test_bool_flag_does_not_consume_next_argument(self) -> None:
        values = parse_flags(["debug:bool", "port:int"], ["--debug", "serve", "--port", "9000"])
        assert values == {"debug": True, "port": 9000}

    def test_last_bool_occurrence_wins(self) -> None:
        assert parse_flags(["debug:bool"], ["--debug", "--debug=off"]) == {"debug": False}
        assert parse_flags(["debug:bool"], ["--debug=off", "--debug"]) == {"debug": True}

    def test_arguments_after_separator_are_not_flags(self) -> None:
        assert parse_flags(["debug:bool"], ["--", "--debug"]) == {}

    def test_unknown_flag_type_raises(self) -> None:
        with pytest.raises(ConfigError, match="desconhecido"):
            parse_flags(["debug:yesno"], [])

    def test_missing_value_raises_instead_of_exiting(self) -> None:
        with pytest.raises(ConfigError):
            parse_flags(["port:int"], ["--port"])


class TestReads:
    def test_string_conversions(self) -> None:
        store = ConfigStore(data={"flag": True, "count": 3, "empty": "", "none": None})
        assert store.string("flag") == "true"
        assert store.string("count") == "3"
        assert store.string("none", "d") == "d"
        assert store.string("missing", "d") == "d"
        assert store.string("empty", "d") == ""
        assert store.def_string("empty", "d") == "d"

    def test_bool_and_int_parsing(self) -> None:
        store = ConfigStore(data={"a": "yes", "b": "0", "n": "12", "bad": "x"})
        assert store.bool("a") is True
        assert store.bool("b") is False
        assert store.bool("missing", True) is True
        assert store.int("n") == 12
        with pytest.raises(ConfigError):
            store.bool("bad")
        with pytest.raises(ConfigError):
            store.int("bad")

    def test_dotted_lookup_reaches_lists(self) -> None:
        store = ConfigStore(data={"servers": [{"host": "a"}, {"host": "b"}]})
        assert store.get("servers.1.host") == "b"
        assert store.get("servers.5.host", "none") == "none"
        assert "servers" in store
        assert "servers.9" not in store

    def test_to_dict_is_a_copy(self) -> None:
        store = ConfigStore(data={"nested": {"k": 1}})
        snapshot = store.to_dict()
        snapshot["nested"]["k"] = 2
        assert store.get("nested.k") == 1


class TestLock:
    def test_writes_after_lock_raise(self, write_file) -> None:
        store = ConfigStore()
        store.set("server.port", 1)
        store.lock()

        assert store.locked is True
        assert store.get("server.port") == 1
        with pytest.raises(ConfigLockedError):
            store.set("server.port", 2)
        with pytest.raises(ConfigLockedError):
            store.load_exists(write_file("x.yaml", "a: 1\n"))
        with pytest.raises(ConfigLockedError):
            store.load_flags(["debug:bool"], ["--debug"])


def test_expand_env_walks_nested_structures(monkeypatch) -> None:
    monkeypatch.setenv("APPBOOT_TEST_X", "1")
    assert expand_env({"a": ["${APPBOOT_TEST_X}", 2], "b": {"c": "v${APPBOOT_TEST_X}"}}) == {
        "a": ["1", 2],
        "b": {"c": "v1"},
    }
