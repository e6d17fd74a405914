"""
Fixed-format text output for genotype QC reports.
"""

import pandas as pd

from genotype_qc.qc.statistics import SummaryStats


def _fmt(value: float) -> str:
    return f"{value:.6g}"


def format_summary(
    title: str,
    n_loc: int,
    n_ind: int,
    stats: SummaryStats,
    missing_rate: float,
    quartile_word: str = "quartile"
) -> str:
    """
    Format the summary statistics block printed by every report.

    Args:
        title: Heading line, e.g. "Reporting Call Rate by Locus"
        n_loc: Number of loci
        n_ind: Number of individuals
        stats: Summary of the reported statistic
        missing_rate: Overall proportion of missing calls
        quartile_word: "quartile" or "quantile" in the quartile labels

    Returns:
        Multi-line report text
    """
    lines = [
        f"  {title}",
        f"  No. of loci = {n_loc}",
        f"  No. of individuals = {n_ind}",
        f"    Minimum      :  {_fmt(stats.minimum)}",
        f"    1st {quartile_word} :  {_fmt(stats.q1)}",
        f"    Median       :  {_fmt(stats.median)}",
        f"    Mean         :  {_fmt(stats.mean)}",
        f"    3r {quartile_word}  :  {_fmt(stats.q3)}",
        f"    Maximum      :  {_fmt(stats.maximum)}",
        f"    Missing Rate Overall:  {missing_rate:g}",
    ]
    return "\n".join(lines) + "\n"


def format_table(df: pd.DataFrame) -> str:
    """Render a table without its index."""
    return df.to_string(index=False) + "\n"


def emit(text: str, verbose: int) -> None:
    """Print report text unless running silently."""
    if verbose >= 1:
        print(text)
