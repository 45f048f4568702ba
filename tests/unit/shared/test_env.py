from __future__ import annotations

import logging

from predictive_hpa.shared.env import load_secret_file_variables


def test_load_secret_file_variables_reads_content(tmp_path) -> None:
    secret_file = tmp_path / "mongo_uri"
    secret_file.write_text("mongodb://secret:27017\n", encoding="utf-8")
    environ = {"DB_MONGO_URI_FILE": str(secret_file)}

    load_secret_file_variables(environ)

    assert environ["DB_MONGO_URI"] == "mongodb://secret:27017"


def test_load_secret_file_variables_reads_multiline_config(tmp_path) -> None:
    config_file = tmp_path / "predictive.yaml"
    config_file.write_text("models: []\ndecisionType: mean\n", encoding="utf-8")
    environ = {"PHPA_CONFIG_FILE": str(config_file)}

    load_secret_file_variables(environ)

    assert environ["PHPA_CONFIG"] == "models: []\ndecisionType: mean"


def test_load_secret_file_variables_logs_missing_file(caplog) -> None:
    environ = {"MISSING_SECRET_FILE": "/tmp/does-not-exist-phpa"}

    with caplog.at_level(logging.WARNING):
        load_secret_file_variables(environ)

    assert "MISSING_SECRET" not in environ
    assert any(
        record.message == "env.secret_file.load_failed" for record in caplog.records
    )


def test_load_secret_file_variables_handles_decode_error(tmp_path) -> None:
    binary_file = tmp_path / "binary.bin"
    binary_file.write_bytes(b"\xff\xfe\xfd")
    environ = {"BINARY_SECRET_FILE": str(binary_file)}

    load_secret_file_variables(environ)

    assert "BINARY_SECRET" not in environ


def test_load_secret_file_variables_skips_existing_target(tmp_path) -> None:
    secret_file = tmp_path / "ignored"
    secret_file.write_text("from-file", encoding="utf-8")
    environ = {"EXISTING": "present", "EXISTING_FILE": str(secret_file)}

    load_secret_file_variables(environ)

    assert environ["EXISTING"] == "present"


def test_load_secret_file_variables_skips_empty_path() -> None:
    environ = {"EMPTY_SECRET_FILE": ""}

    load_secret_file_variables(environ)

    assert "EMPTY_SECRET" not in environ
