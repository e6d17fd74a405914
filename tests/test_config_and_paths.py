"""
Tests for settings loading and working directory resolution.
"""

import logging
import tempfile

from genotype_qc.core.config import DEFAULT_VERBOSITY, ReportSettings, load_settings
from genotype_qc.core.file_handling import check_working_dir, ensure_output_dir


def test_load_settings_defaults():
    settings = load_settings({})
    assert settings == ReportSettings(working_dir=None, verbosity=DEFAULT_VERBOSITY)


def test_load_settings_from_environment(tmp_path):
    settings = load_settings({"GENOTYPE_QC_WD": str(tmp_path), "GENOTYPE_QC_VERBOSITY": "3"})
    assert settings.working_dir == str(tmp_path)
    assert settings.verbosity == 3


def test_load_settings_invalid_verbosity(caplog):
    settings = load_settings({"GENOTYPE_QC_VERBOSITY": "loud"})
    assert settings.verbosity == DEFAULT_VERBOSITY
    assert "Invalid GENOTYPE_QC_VERBOSITY" in caplog.text

    assert load_settings({"GENOTYPE_QC_VERBOSITY": "9"}).verbosity == DEFAULT_VERBOSITY


def test_existing_directory_used_verbatim(tmp_path):
    assert check_working_dir(str(tmp_path)) == str(tmp_path)
    assert check_working_dir(tmp_path) == str(tmp_path)


def test_nonexistent_directory_falls_back_to_tempdir(tmp_path, caplog):
    missing = tmp_path / "does_not_exist"
    with caplog.at_level(logging.WARNING):
        result = check_working_dir(str(missing))

    assert result == tempfile.gettempdir()
    assert "does not exist" in caplog.text


def test_no_directory_and_no_default_is_tempdir():
    assert check_working_dir(None) == tempfile.gettempdir()


def test_no_directory_uses_configured_default(tmp_path):
    assert check_working_dir(None, default_dir=str(tmp_path)) == str(tmp_path)


def test_nonexistent_default_falls_back_to_tempdir(tmp_path, caplog):
    missing = tmp_path / "configured_but_missing"
    with caplog.at_level(logging.WARNING):
        result = check_working_dir(None, default_dir=str(missing))

    assert result == tempfile.gettempdir()
    assert "does not exist" in caplog.text


def test_nonexistent_default_is_quiet_when_silent(tmp_path, caplog):
    with caplog.at_level(logging.WARNING):
        result = check_working_dir(None, default_dir=str(tmp_path / "missing"), verbose=0)

    assert result == tempfile.gettempdir()
    assert caplog.text == ""


def test_explicit_directory_wins_over_default(tmp_path):
    explicit = tmp_path / "explicit"
    explicit.mkdir()
    assert check_working_dir(str(explicit), default_dir=str(tmp_path)) == str(explicit)


def test_ensure_output_dir(tmp_path):
    target = tmp_path / "a" / "b"
    ensure_output_dir(str(target))
    assert target.is_dir()
