"""
Call rate report for SNP and presence/absence (SilicoDArT) datasets.

SNP datasets have missing values mostly from failure to call a SNP because
of a mutation at a restriction enzyme recognition site. P/A datasets have
missing values when it was not possible to call whether a sequence tag was
amplified. The report summarizes call rate by locus or by individual so that
filtering thresholds can be chosen with the resulting loss of data in view.
"""

import logging
from typing import Optional, Sequence

import matplotlib.pyplot as plt

from genotype_qc.core.config import (
    CALLRATE_DIGITS,
    DEFAULT_CALLRATE_BINS,
    DEFAULT_IND_TO_LIST,
    DEFAULT_PLOT_THEME,
    DEFAULT_SETTINGS,
    ReportSettings,
)
from genotype_qc.core.file_handling import check_working_dir
from genotype_qc.core.logging_setup import ensure_console_logging, log_input_parameters, log_system_info
from genotype_qc.core.utils import flag_end, flag_start
from genotype_qc.core.validation import (
    check_datatype,
    check_verbosity,
    has_callrate,
    validate_method,
    validate_plot_colors,
)
from genotype_qc.qc.plot_quality import (
    build_distribution_chart,
    callrate_plot_range,
    display_chart,
    resolve_theme,
)
from genotype_qc.qc.statistics import (
    callrate_by_individual,
    callrate_by_locus,
    lowest_callrate_individuals,
    overall_missing_rate,
    population_callrates,
    summarize,
)
from genotype_qc.reporting.plot_save import save_plot
from genotype_qc.reporting.text_report import emit, format_summary, format_table

FUNC_NAME = "report_callrate"

TITLES = {
    ("SNP", "loc"): "SNP data - Call Rate by Locus",
    ("SNP", "ind"): "SNP data - Call Rate by Individual",
    ("SilicoDArT", "loc"): "Fragment P/A data - Call Rate by Locus",
    ("SilicoDArT", "ind"): "Fragment P/A data - Call Rate by Individual",
}


def report_callrate(
    dataset,
    method: str = "loc",
    ind_to_list: int = DEFAULT_IND_TO_LIST,
    plot_display: bool = True,
    plot_theme: str = DEFAULT_PLOT_THEME,
    plot_colors: Optional[Sequence[str]] = None,
    plot_dir: Optional[str] = None,
    plot_file: Optional[str] = None,
    plot_type: str = "pickle",
    bins: int = DEFAULT_CALLRATE_BINS,
    verbose: Optional[int] = None,
    settings: Optional[ReportSettings] = None,
    **savefig_kwargs
):
    """
    Report a summary of call rate for loci or individuals.

    Args:
        dataset: GenotypeDataset with SNP or presence/absence data
        method: 'loc' to report by locus, 'ind' to report by individual
        ind_to_list: Number of lowest call rate individuals to list ('ind' only)
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
    method = validate_method(method)
    datatype = check_datatype(dataset, verbose=0)

    flag_start(FUNC_NAME, datatype, verbose)
    if verbose >= 5:
        log_input_parameters({
            "method": method,
            "ind_to_list": ind_to_list,
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

    missing_rate = overall_missing_rate(dataset, digits=CALLRATE_DIGITS)

    if method == "loc":
        if has_callrate(dataset) and verbose >= 3:
            logging.info("  Recalculating locus call rates from the genotype matrix")
        callrate = callrate_by_locus(dataset)
        heading = "Reporting Call Rate by Locus"
    else:
        callrate = callrate_by_individual(dataset)
        heading = "Reporting Call Rate by Individual"

    if verbose >= 2:
        logging.info(f"  Calculated call rate for {len(callrate)} {'loci' if method == 'loc' else 'individuals'}")

    stats = summarize(callrate)
    emit(format_summary(heading, dataset.n_loc, dataset.n_ind, stats, missing_rate), verbose)

    if method == "ind":
        means = population_callrates(dataset)
        emit(f"Listing {dataset.n_pop} populations and their average CallRates\n"
             f"  Monitor again after filtering", verbose)
        emit(format_table(means), verbose)

        lowest = lowest_callrate_individuals(dataset, ind_to_list)
        emit(f"Listing {ind_to_list} individuals with the lowest CallRates\n"
             f"  Use this list to see which individuals will be lost on filtering by individual\n"
             f"  Set ind_to_list parameter to see more individuals", verbose)
        emit(format_table(lowest), verbose)

    chart = build_distribution_chart(
        callrate,
        title=TITLES[(datatype, method)],
        xlabel="Call rate",
        colors=plot_colors,
        bins=bins,
        xlim=callrate_plot_range(callrate),
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
