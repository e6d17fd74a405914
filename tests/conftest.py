"""
Shared fixtures for the genotype QC report tests.
"""

import matplotlib

matplotlib.use("Agg")

import numpy as np
import pandas as pd
import pytest

from genotype_qc.core.config import ReportSettings
from genotype_qc.core.dataset import GenotypeDataset

N_IND = 20
N_LOC = 100
N_MISSING = 100  # 5% of 2000 calls


def _make_genotypes(seed: int = 42) -> pd.DataFrame:
    rng = np.random.default_rng(seed)
    calls = rng.integers(0, 3, size=(N_IND, N_LOC)).astype(float)
    missing = rng.choice(N_IND * N_LOC, size=N_MISSING, replace=False)
    calls.flat[missing] = np.nan
    return pd.DataFrame(
        calls,
        index=[f"ind{i:02d}" for i in range(N_IND)],
        columns=[f"loc{j:03d}" for j in range(N_LOC)],
    )


def _make_loc_metrics(genotypes: pd.DataFrame, seed: int = 7) -> pd.DataFrame:
    rng = np.random.default_rng(seed)
    lengths = rng.integers(20, 70, size=genotypes.shape[1])
    return pd.DataFrame(
        {
            "TrimmedSequence": ["A" * n for n in lengths],
            "CallRate": 1 - genotypes.isna().mean(axis=0).to_numpy(),
        },
        index=genotypes.columns,
    )


@pytest.fixture
def snp_dataset():
    """
    SNP dataset of 20 individuals x 100 loci with 5% of calls missing.

    Returns:
        GenotypeDataset: Individuals split into two populations of 10
    """
    genotypes = _make_genotypes()
    pop = pd.Series(["popA"] * 10 + ["popB"] * 10, index=genotypes.index, name="pop")
    return GenotypeDataset(genotypes=genotypes, loc_metrics=_make_loc_metrics(genotypes), pop=pop, ploidy=2)


@pytest.fixture
def pa_dataset():
    """Presence/absence (SilicoDArT) dataset without locus metrics."""
    genotypes = _make_genotypes(seed=3).clip(upper=1)
    return GenotypeDataset(genotypes=genotypes, ploidy=1)


@pytest.fixture
def settings():
    """Settings with no default working directory and progress verbosity."""
    return ReportSettings(working_dir=None, verbosity=2)


@pytest.fixture
def dataset_csv_files(tmp_path, snp_dataset):
    """
    Write the SNP dataset to CSV files.

    Returns:
        dict: Paths of the genotype, population and locus metrics files
    """
    genotype_file = tmp_path / "genotypes.csv"
    pop_file = tmp_path / "pops.csv"
    loc_metrics_file = tmp_path / "loc_metrics.csv"

    snp_dataset.genotypes.to_csv(genotype_file)
    pd.DataFrame({
        "individual": snp_dataset.ind_names,
        "pop": snp_dataset.pop.to_numpy(),
    }).to_csv(pop_file, index=False)
    snp_dataset.loc_metrics.to_csv(loc_metrics_file)

    return {
        "genotype_file": str(genotype_file),
        "pop_file": str(pop_file),
        "loc_metrics_file": str(loc_metrics_file),
    }
