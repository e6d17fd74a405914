"""
Input validation functions for genotype QC reports.
"""

import logging
from typing import Optional, Sequence, Tuple

from genotype_qc.core.config import (
    CALLRATE_COLUMN,
    DATATYPE_BY_PLOIDY,
    DEFAULT_PLOT_COLORS,
    MAX_VERBOSITY,
    TRIMMED_SEQUENCE_COLUMN,
    ReportSettings,
)


class GenotypeQCError(Exception):
    """Base class for genotype QC errors."""


class DatasetValidationError(GenotypeQCError, ValueError):
    """Raised when a dataset lacks the fields a report requires."""


class UnknownPlotFormatError(GenotypeQCError, ValueError):
    """Raised for a plot save type that is not in the list of acceptable types."""


def check_verbosity(verbose: Optional[int], settings: ReportSettings) -> int:
    """
    Resolve the verbosity level for a report call.

    Args:
        verbose: Explicit verbosity (0 silent, 1 begin/end, 2 progress, 3 results, 5 full)
        settings: Settings supplying the default verbosity

    Returns:
        Verbosity level to use
    """
    if verbose is None:
        verbose = settings.verbosity

    if not isinstance(verbose, int) or isinstance(verbose, bool) or not 0 <= verbose <= MAX_VERBOSITY:
        raise ValueError(f"Verbosity must be an integer between 0 and {MAX_VERBOSITY}, got {verbose!r}")

    return verbose


def check_datatype(dataset, verbose: int = 0) -> str:
    """
    Determine whether the dataset holds SNP or presence/absence data.

    Args:
        dataset: GenotypeDataset to inspect
        verbose: Verbosity level

    Returns:
        "SNP" or "SilicoDArT"
    """
    datatype = DATATYPE_BY_PLOIDY.get(dataset.ploidy)
    if datatype is None:
        raise DatasetValidationError(
            f"Fatal Error: Ploidy must be 1 (SilicoDArT) or 2 (SNP), got {dataset.ploidy}"
        )

    if dataset.n_ind == 0 or dataset.n_loc == 0:
        raise DatasetValidationError("Fatal Error: Dataset contains no individuals or no loci")

    if verbose >= 2:
        logging.info(f"  Processing {datatype} data")

    return datatype


def validate_method(method: str) -> str:
    """Check that a report method is 'loc' or 'ind'."""
    if method not in ("loc", "ind"):
        raise ValueError(f"Method must be 'loc' or 'ind', got {method!r}")
    return method


def validate_plot_colors(colors: Optional[Sequence[str]], verbose: int = 2) -> Tuple[str, str]:
    """
    Resolve the border and fill colors for report plots.

    Args:
        colors: User supplied colors, or None for the default pair
        verbose: Verbosity level

    Returns:
        Tuple of (border, fill) colors
    """
    if colors is None:
        return DEFAULT_PLOT_COLORS

    if isinstance(colors, str):
        colors = [colors]
    colors = list(colors)

    if len(colors) < 2:
        raise ValueError("Two plot colors are required (border and fill)")

    if len(colors) > 2:
        if verbose >= 2:
            logging.warning("  More than 2 colors specified, only the first 2 are used")
        colors = colors[:2]

    return colors[0], colors[1]


def validate_trimmed_sequences(dataset) -> None:
    """
    Check that the dataset has a trimmed sequence for every locus.

    Args:
        dataset: GenotypeDataset to inspect
    """
    loc_metrics = dataset.loc_metrics
    if (
        TRIMMED_SEQUENCE_COLUMN not in loc_metrics.columns
        or len(loc_metrics[TRIMMED_SEQUENCE_COLUMN]) != dataset.n_loc
        or loc_metrics[TRIMMED_SEQUENCE_COLUMN].isna().any()
    ):
        raise DatasetValidationError(
            f"Fatal Error: Data must include Trimmed Sequences for each loci in a column "
            f"called '{TRIMMED_SEQUENCE_COLUMN}' in the locus metrics table."
        )


def has_callrate(dataset) -> bool:
    """Return True if the locus metrics table carries a call rate column."""
    return CALLRATE_COLUMN in dataset.loc_metrics.columns
