"""Testes da carga de arquivos .env com verificação de existência."""

from __future__ import annotations

import os

import pytest

from config.env import load_env_exists, load_env_file
from utils.errors import EnvFileError


def test_missing_files_are_skipped(tmp_path) -> None:
    assert load_env_exists(tmp_path, ".env", ".env.local") == []
    assert load_env_exists(tmp_path / "nowhere") == []


def test_existing_files_load_in_order(tmp_path, write_file, isolated_env) -> None:
    isolated_env("APPBOOT_TEST_A", "APPBOOT_TEST_B")
    write_file(".env", "APPBOOT_TEST_A=first\nAPPBOOT_TEST_B=\"quoted value\"\n")
    write_file(".env.local", "APPBOOT_TEST_A=second\n")

    loaded = load_env_exists(tmp_path, ".env", ".env.local", override=True)

    assert loaded == [str(tmp_path / ".env"), str(tmp_path / ".env.local")]
    assert os.environ["APPBOOT_TEST_A"] == "second"
    assert os.environ["APPBOOT_TEST_B"] == "quoted value"


def test_existing_process_variables_win_without_override(
    write_file, isolated_env, monkeypatch
) -> None:
    isolated_env("APPBOOT_TEST_KEEP")
    monkeypatch.setenv("APPBOOT_TEST_KEEP", "process")
    env_file = write_file(".env", "APPBOOT_TEST_KEEP=file\n")

    applied = load_env_file(env_file)

    assert applied == {}
    assert os.environ["APPBOOT_TEST_KEEP"] == "process"


def test_key_without_value_is_ignored(write_file, isolated_env) -> None:
    isolated_env("APPBOOT_TEST_BARE", "APPBOOT_TEST_SET")
    env_file = write_file(".env", "APPBOOT_TEST_BARE\nAPPBOOT_TEST_SET=1\n")

    applied = load_env_file(env_file)

    assert applied == {"APPBOOT_TEST_SET": "1"}
    assert "APPBOOT_TEST_BARE" not in os.environ


def test_malformed_file_raises_with_line(write_file, isolated_env) -> None:
    isolated_env("APPBOOT_TEST_GOOD")
    env_file = write_file(".env", "APPBOOT_TEST_GOOD=1\nthis line is broken\n")

    with pytest.raises(EnvFileError) as exc_info:
        load_env_file(env_file)

    assert exc_info.value.path == str(env_file)
    assert exc_info.value.line == 2
    # Nada é aplicado quando o arquivo é inválido
    assert "APPBOOT_TEST_GOOD" not in os.environ


def test_later_file_overrides_earlier_without_override(tmp_path, write_file, isolated_env) -> None:
    isolated_env("APPBOOT_TEST_LAYER", "APPBOOT_TEST_BASE_ONLY")
    write_file(".env", "APPBOOT_TEST_LAYER=base\nAPPBOOT_TEST_BASE_ONLY=kept\n")
    write_file(".env.local", "APPBOOT_TEST_LAYER=local\n")

    load_env_exists(tmp_path, ".env", ".env.local")

    assert os.environ["APPBOOT_TEST_LAYER"] == "local"
    assert os.environ["APPBOOT_TEST_BASE_ONLY"] == "kept"


def test_process_variable_survives_every_file(tmp_path, write_file, isolated_env, monkeypatch) -> None:
    isolated_env("APPBOOT_TEST_PINNED")
    monkeypatch.setenv("APPBOOT_TEST_PINNED", "process")
    write_file(".env", "APPBOOT_TEST_PINNED=base\n")
    write_file(".env.local", "APPBOOT_TEST_PINNED=local\n")

    load_env_exists(tmp_path, ".env", ".env.local")

    assert os.environ["APPBOOT_TEST_PINNED"] == "process"


def test_invalid_utf8_raises_env_file_error(tmp_path) -> None:
    env_file = tmp_path / ".env"
    env_file.write_bytes(b"APPBOOT_TEST_BINARY=\xff\xfe\n")

    with pytest.raises(EnvFileError) as exc_info:
        load_env_file(env_file)

    assert exc_info.value.path == str(env_file)
