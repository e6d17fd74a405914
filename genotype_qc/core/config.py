"""
Configuration settings for genotype QC reports.
"""

import os
import logging
from dataclasses import dataclass
from typing import Mapping, Optional

# Plot defaults
DEFAULT_PLOT_COLORS = ("#2171B5", "#6BAED6")  # Border, fill
DEFAULT_PLOT_THEME = "ticks"  # Seaborn axes style
PLOT_THEMES = ["darkgrid", "whitegrid", "dark", "white", "ticks"]
DEFAULT_CALLRATE_BINS = 50
DEFAULT_TAGLENGTH_BINS = 50
DEFAULT_HEIGHT_RATIOS = (1, 4)  # Boxplot above histogram
TAGLENGTH_PLOT_RANGE = (0, 100)

# Report defaults
DEFAULT_IND_TO_LIST = 20
DEFAULT_VERBOSITY = 2
MAX_VERBOSITY = 5
N_QUANTILES = 20  # 0%, 5%, ..., 100%
CALLRATE_DIGITS = 4
TAGLENGTH_MISSING_DIGITS = 2

# Required dataset fields
CALLRATE_COLUMN = "CallRate"
TRIMMED_SEQUENCE_COLUMN = "TrimmedSequence"
DEFAULT_POPULATION = "pop1"

# Data types by ploidy
DATATYPE_BY_PLOIDY = {
    2: "SNP",
    1: "SilicoDArT",
}

# Environment variables read once at import
WORKING_DIR_ENV = "GENOTYPE_QC_WD"
VERBOSITY_ENV = "GENOTYPE_QC_VERBOSITY"


@dataclass(frozen=True)
class ReportSettings:
    """Process-wide defaults for report functions."""
    working_dir: Optional[str] = None
    verbosity: int = DEFAULT_VERBOSITY


def load_settings(environ: Optional[Mapping[str, str]] = None) -> ReportSettings:
    """
    Build report settings from environment variables.

    Args:
        environ: Mapping to read from (defaults to os.environ)

    Returns:
        ReportSettings with the default working directory and verbosity
    """
    if environ is None:
        environ = os.environ

    working_dir = environ.get(WORKING_DIR_ENV) or None

    verbosity = DEFAULT_VERBOSITY
    if VERBOSITY_ENV in environ:
        try:
            verbosity = int(environ[VERBOSITY_ENV])
            if not 0 <= verbosity <= MAX_VERBOSITY:
                raise ValueError(verbosity)
        except ValueError:
            logging.warning(f"Invalid {VERBOSITY_ENV} value: {environ[VERBOSITY_ENV]}, using {DEFAULT_VERBOSITY}")
            verbosity = DEFAULT_VERBOSITY

    return ReportSettings(working_dir=working_dir, verbosity=verbosity)


DEFAULT_SETTINGS = load_settings()
