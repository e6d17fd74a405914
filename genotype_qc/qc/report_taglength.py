"""
Tag length report for SNP datasets.

SNP datasets generated by DArT typically have sequence tag lengths from 20
to 69 base pairs. The report gives summary statistics of the tag lengths
and a tabulation of loci retained and filtered at each tag length quantile,
to guide the choice of a filtering threshold.
"""

import logging
from typing import Optional, Sequence

import matplotlib.pyplot as plt

from genotype_qc.core.config import (
    DEFAULT_PLOT_THEME,
    DEFAULT_SETTINGS,
    DEFAULT_TAGLENGTH_BINS,
    N_QUANTILES,
    TAGLENGTH_MISSING_DIGITS,
    TAGLENGTH_PLOT_RANGE,
    ReportSettings,
)
from genotype_qc.core.file_handling import check_working_dir
from genotype_qc.core.logging_setup import ensure_console_logging, log_input_parameters, log_system_info
from genotype_qc.core.utils import flag_end, flag_start
from genotype_qc.core.validation import (
    check_datatype,
    check_verbosity,
    validate_plot_colors,
    validate_trimmed_sequences,
)
from genotype_qc.qc.plot_quality import build_distribution_chart, display_chart, resolve_theme
from genotype_qc.qc.statistics import (
    overall_missing_rate,
    quantile_threshold_table,
    summarize,
    tag_lengths,
)
from genotype_qc.reporting.plot_save import save_plot
from genotype_qc.reporting.text_report import emit, format_summary, format_table

FUNC_NAME = "report_taglength"


def report_taglength(
    dataset,
    plot_display: bool = True,
    plot_theme: str = DEFAULT_PLOT_THEME,
    plot_colors: Optional[Sequence[str]] = None,
    plot_dir: Optional[str] = None,
    plot_file: Optional[str] = None,
    plot_type: str = "pickle",
    bins: int = DEFAULT_TAGLENGTH_BINS,
    verbose: Optional[int] = None,
    settings: Optional[ReportSettings] = None,
    **savefig_kwargs
):
    """
    Report a summary of sequence tag length across loci.

    Args:
        dataset: GenotypeDataset whose locus metrics include 'TrimmedSequence'
        plot_display: Whether to show the plot in the graphics window
        plot_theme: Seaborn axes style for the plot
        plot_colors: Border and fill colors (default blue pair)
        plot_dir: Directory to save the plot (default working directory or tempdir)
        plot_file: File name without extension; the plot is saved only if given
        plot_type: Save type tag, e.g. "pickle", "png", "pdf"
        bins: Number of histogram bins
        verbose: 0 silent, 1 begin and end, 2 progress, 3 results, 5 full report
        settings: Overrides the process-wide default settings
        **savefig_kwargs: Passed to Figure.savefig when saving an image

    Returns:
        The dataset, unaltered
    """
    ensure_console_logging()

    if settings is None:
        settings = DEFAULT_SETTINGS

    verbose = check_verbosity(verbose, settings)
    plot_dir = check_working_dir(plot_dir, default_dir=settings.working_dir, verbose=verbose)
    plot_colors = validate_plot_colors(plot_colors, verbose=verbose)
    plot_theme = resolve_theme(plot_theme, verbose=verbose)
    datatype = check_datatype(dataset, verbose=0)
    validate_trimmed_sequences(dataset)

    flag_start(FUNC_NAME, datatype, verbose)
    if verbose >= 5:
        log_input_parameters({
            "plot_display": plot_display,
            "plot_theme": plot_theme,
            "plot_colors": plot_colors,
            "plot_dir": plot_dir,
            "plot_file": plot_file,
            "plot_type": plot_type,
            "bins": bins,
        })
        log_system_info()

    if verbose == 0:
        plot_display = False

    lengths = tag_lengths(dataset)
    if verbose >= 2:
        logging.info(f"  Calculated tag lengths for {len(lengths)} loci")

    stats = summarize(lengths)
    missing_rate = overall_missing_rate(dataset, digits=TAGLENGTH_MISSING_DIGITS)
    emit(format_summary("Reporting Tag Length", dataset.n_loc, dataset.n_ind, stats, missing_rate,
                        quartile_word="quantile"), verbose)

    thresholds = quantile_threshold_table(lengths, n_quantiles=N_QUANTILES)
    emit(format_table(thresholds), verbose)

    chart = build_distribution_chart(
        lengths,
        title="SNP data - Tag Length",
        xlabel="Tag Length",
        colors=plot_colors,
        bins=bins,
        xlim=TAGLENGTH_PLOT_RANGE,
        theme=plot_theme,
    )

    if plot_display:
        fig = display_chart(chart)
        plt.close(fig)

    if plot_file is not None:
        save_plot(chart, directory=plot_dir, file=plot_file, plot_type=plot_type,
                  verbose=verbose, **savefig_kwargs)

    flag_end(FUNC_NAME, verbose)

    return dataset
