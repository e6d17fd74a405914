"""
Descriptive statistics for genotype QC reports.
"""

from dataclasses import dataclass
from typing import Sequence

import numpy as np
import pandas as pd

from genotype_qc.core.config import N_QUANTILES, TRIMMED_SEQUENCE_COLUMN


@dataclass(frozen=True)
class SummaryStats:
    """Six-number summary of a statistic vector."""
    minimum: float
    q1: float
    median: float
    mean: float
    q3: float
    maximum: float


def summarize(values: Sequence[float]) -> SummaryStats:
    """
    Summarize a vector as min, quartiles, mean and max, ignoring NaN.

    Quartiles are linearly interpolated between order statistics.
    """
    values = np.asarray(values, dtype=float)
    if np.isnan(values).all():
        raise ValueError("Cannot summarize a vector with no observed values")

    q1, median, q3 = np.nanquantile(values, [0.25, 0.5, 0.75])
    return SummaryStats(
        minimum=float(np.nanmin(values)),
        q1=float(q1),
        median=float(median),
        mean=float(np.nanmean(values)),
        q3=float(q3),
        maximum=float(np.nanmax(values)),
    )


def overall_missing_rate(dataset, digits: int = 4) -> float:
    """Proportion of missing calls in the whole matrix."""
    missing = int(dataset.missing_mask().sum())
    return round(missing / (dataset.n_ind * dataset.n_loc), digits)


def callrate_by_locus(dataset) -> pd.Series:
    """Call rate of each locus, recalculated from the genotype matrix."""
    missing = dataset.missing_mask().sum(axis=0)
    return pd.Series(1 - missing / dataset.n_ind, index=dataset.genotypes.columns, name="CallRate")


def callrate_by_individual(dataset) -> pd.Series:
    """Call rate of each individual across all loci."""
    missing = dataset.missing_mask().sum(axis=1)
    return pd.Series(1 - missing / dataset.n_loc, index=dataset.genotypes.index, name="CallRate")


def tag_lengths(dataset) -> pd.Series:
    """Length of the trimmed sequence tag of each locus."""
    tags = dataset.loc_metrics[TRIMMED_SEQUENCE_COLUMN].astype(str)
    return tags.str.len().rename("TagLength")


def population_callrates(dataset) -> pd.DataFrame:
    """
    Mean individual call rate and sample size for each population.

    Returns:
        DataFrame with Population, CallRate and N columns
    """
    ind_callrate = callrate_by_individual(dataset)
    pop = pd.Series(dataset.pop.to_numpy(), index=ind_callrate.index)

    grouped = ind_callrate.groupby(pop, sort=True)
    means = pd.DataFrame({
        "Population": grouped.mean().index,
        "CallRate": grouped.mean().round(4).to_numpy(),
        "N": grouped.size().to_numpy(),
    })
    return means.reset_index(drop=True)


def lowest_callrate_individuals(dataset, n: int = 20) -> pd.DataFrame:
    """
    Individuals with the lowest call rates, sorted ascending.

    Args:
        dataset: GenotypeDataset to inspect
        n: Number of individuals to list

    Returns:
        DataFrame with Individual and CallRate columns
    """
    if n < 0:
        raise ValueError(f"Number of individuals to list must be non-negative, got {n}")

    ind_callrate = callrate_by_individual(dataset)
    df = pd.DataFrame({
        "Individual": dataset.ind_names,
        "CallRate": ind_callrate.to_numpy(),
    })
    df = df.sort_values("CallRate", kind="mergesort").reset_index(drop=True)
    return df.head(n)


def nearest_rank_quantiles(values: Sequence[float], probs: Sequence[float]) -> np.ndarray:
    """
    Quantiles without interpolation: the value at rank ceil(p * n) of the sorted data.

    p * n is rounded before the ceiling so that 0.3 * 10 selects rank 3.
    """
    ordered = np.sort(np.asarray(values, dtype=float))
    n = len(ordered)
    ranks = np.ceil(np.round(np.asarray(probs, dtype=float) * n, 9)).astype(int)
    ranks = np.clip(ranks, 1, n)
    return ordered[ranks - 1]


def quantile_threshold_table(values: Sequence[float], n_quantiles: int = N_QUANTILES) -> pd.DataFrame:
    """
    Tabulate records retained and filtered at each quantile threshold.

    Thresholds are nearest-rank quantiles at 0%, 100/n%, ..., 100%. A record
    is retained when its value is at or above the threshold. Thresholds are
    integers when every value is a whole number.

    Args:
        values: Statistic vector (NaN values are dropped)
        n_quantiles: Number of partitions

    Returns:
        DataFrame sorted from the highest quantile to the lowest
    """
    values = np.asarray(values, dtype=float)
    values = values[~np.isnan(values)]
    if len(values) == 0:
        raise ValueError("Cannot tabulate quantiles of an empty vector")

    total = len(values)
    probs = np.arange(n_quantiles + 1) / n_quantiles
    thresholds = nearest_rank_quantiles(values, probs)
    if np.all(np.mod(values, 1) == 0):
        # whole-number statistics such as tag lengths print without a decimal
        thresholds = thresholds.astype(np.int64)

    retained = np.array([int((values >= threshold).sum()) for threshold in thresholds])
    pc_retained = np.round(retained * 100 / total, 1)

    df = pd.DataFrame({
        "Quantile": np.round(probs * 100, 6),
        "Threshold": thresholds,
        "Retained": retained,
        "PcRetained": pc_retained,
        "Filtered": total - retained,
        "PcFiltered": np.round(100 - pc_retained, 1),
    })
    df = df.sort_values("Quantile", ascending=False).reset_index(drop=True)
    df["Quantile"] = [f"{q:g}%" for q in df["Quantile"]]
    return df
