"""
Tests for the command line entry point.
"""

import pytest
from unittest.mock import patch

from genotype_qc.cli import main, parse_args


def test_parse_args_callrate():
    args = parse_args(["callrate", "genotypes.csv", "--method", "ind", "--ind-to-list", "5", "--no-display"])

    assert args.report == "callrate"
    assert args.genotype_file == "genotypes.csv"
    assert args.method == "ind"
    assert args.ind_to_list == 5
    assert args.no_display is True
    assert args.plot_type == "pickle"


def test_parse_args_requires_report():
    with pytest.raises(SystemExit):
        parse_args([])


@patch("genotype_qc.cli.setup_logging")
def test_callrate_command(mock_logging, dataset_csv_files, tmp_path, capsys):
    plot_dir = tmp_path / "plots"
    exit_code = main([
        "callrate", dataset_csv_files["genotype_file"],
        "--pop-file", dataset_csv_files["pop_file"],
        "--method", "ind",
        "--no-display",
        "--plot-dir", str(plot_dir),
        "--plot-file", "callrate",
    ])

    assert exit_code == 0
    assert mock_logging.called
    assert "Reporting Call Rate by Individual" in capsys.readouterr().out
    assert (plot_dir / "callrate.pkl").exists()


@patch("genotype_qc.cli.setup_logging")
def test_taglength_command(mock_logging, dataset_csv_files, capsys):
    exit_code = main([
        "taglength", dataset_csv_files["genotype_file"],
        "--loc-metrics", dataset_csv_files["loc_metrics_file"],
        "--no-display",
    ])

    assert exit_code == 0
    assert "Reporting Tag Length" in capsys.readouterr().out


@patch("genotype_qc.cli.setup_logging")
def test_taglength_without_sequences_fails(mock_logging, dataset_csv_files, capsys):
    exit_code = main(["taglength", dataset_csv_files["genotype_file"], "--no-display"])

    assert exit_code == 1
    assert "Reporting Tag Length" not in capsys.readouterr().out


@patch("genotype_qc.cli.setup_logging")
def test_missing_genotype_file_fails(mock_logging, tmp_path):
    assert main(["callrate", str(tmp_path / "missing.csv"), "--no-display"]) == 1
