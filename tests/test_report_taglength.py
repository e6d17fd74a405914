"""
Tests for the tag length report.
"""

import pandas as pd
import pytest

from genotype_qc.core.dataset import GenotypeDataset
from genotype_qc.core.validation import DatasetValidationError
from genotype_qc.qc.report_taglength import report_taglength
from genotype_qc.reporting.plot_save import load_plot


def test_returns_dataset_unaltered(snp_dataset, settings):
    loc_metrics_before = snp_dataset.loc_metrics.copy()
    genotypes_before = snp_dataset.genotypes.copy()

    result = report_taglength(snp_dataset, plot_display=False, settings=settings)

    assert result is snp_dataset
    assert result.loc_metrics.equals(loc_metrics_before)
    assert result.genotypes.equals(genotypes_before)


def test_report_text_and_quantile_table(snp_dataset, settings, capsys):
    report_taglength(snp_dataset, plot_display=False, settings=settings)
    out = capsys.readouterr().out

    assert "Reporting Tag Length" in out
    assert "1st quantile" in out
    assert "Missing Rate Overall:  0.05" in out
    for column in ["Quantile", "Threshold", "Retained", "PcRetained", "Filtered", "PcFiltered"]:
        assert column in out
    assert out.index("100%") < out.index("95%") < out.index(" 0%")


def test_quantile_table_prints_whole_tag_lengths(snp_dataset, settings, capsys):
    report_taglength(snp_dataset, plot_display=False, settings=settings)
    out = capsys.readouterr().out

    longest = snp_dataset.loc_metrics["TrimmedSequence"].str.len().max()
    top_row = next(line.split() for line in out.splitlines() if line.strip().startswith("100%"))
    assert top_row[1] == str(longest)


def test_missing_trimmed_sequences_is_fatal(pa_dataset, settings, capsys, tmp_path):
    with pytest.raises(DatasetValidationError, match="Trimmed Sequences"):
        report_taglength(pa_dataset, plot_display=False, plot_dir=str(tmp_path), plot_file="tags",
                         settings=settings)

    assert capsys.readouterr().out == ""
    assert list(tmp_path.iterdir()) == []


def test_short_trimmed_sequence_column_is_fatal(snp_dataset, settings):
    loc_metrics = pd.DataFrame({"TrimmedSequence": ["ACGT"] * 99 + [None]}, index=snp_dataset.genotypes.columns)
    dataset = GenotypeDataset(genotypes=snp_dataset.genotypes, loc_metrics=loc_metrics, pop=snp_dataset.pop)

    with pytest.raises(DatasetValidationError):
        report_taglength(dataset, plot_display=False, settings=settings)


def test_saves_tag_length_chart(snp_dataset, settings, tmp_path):
    report_taglength(snp_dataset, plot_display=False, plot_dir=str(tmp_path), plot_file="tags",
                     plot_type="pdf", settings=settings)

    chart = load_plot(str(tmp_path / "tags.pkl"))
    assert chart.title == "SNP data - Tag Length"
    assert chart.xlabel == "Tag Length"
    assert chart.xlim == (0.0, 100.0)
    assert chart.bins == 50
    assert len(chart.values) == 100
    assert (tmp_path / "tags.pdf").read_bytes().startswith(b"%PDF")
