"""
Genotype dataset container.

A read-only view of SNP or presence/absence (SilicoDArT) marker data: a
matrix of calls (individuals x loci, NaN for missing), a per-locus
metrics table and a population label per individual.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

import numpy as np
import pandas as pd

from genotype_qc.core.config import DEFAULT_POPULATION
from genotype_qc.core.validation import DatasetValidationError


@dataclass(frozen=True, eq=False)
class GenotypeDataset:
    """Marker calls with locus metadata and population assignments."""
    genotypes: pd.DataFrame
    loc_metrics: pd.DataFrame = field(default_factory=pd.DataFrame)
    pop: Optional[pd.Series] = None
    ploidy: int = 2

    def __post_init__(self):
        if not isinstance(self.genotypes, pd.DataFrame):
            raise DatasetValidationError("Genotypes must be a pandas DataFrame (individuals x loci)")

        if self.pop is None:
            object.__setattr__(
                self, "pop",
                pd.Series([DEFAULT_POPULATION] * len(self.genotypes), index=self.genotypes.index, name="pop")
            )
        elif len(self.pop) != len(self.genotypes):
            raise DatasetValidationError(
                f"Population labels ({len(self.pop)}) do not match number of individuals ({len(self.genotypes)})"
            )

        if len(self.loc_metrics.columns) > 0 and len(self.loc_metrics) != self.genotypes.shape[1]:
            raise DatasetValidationError(
                f"Locus metrics have {len(self.loc_metrics)} rows but the dataset has "
                f"{self.genotypes.shape[1]} loci"
            )

    @property
    def n_ind(self) -> int:
        return self.genotypes.shape[0]

    @property
    def n_loc(self) -> int:
        return self.genotypes.shape[1]

    @property
    def n_pop(self) -> int:
        return self.pop.nunique()

    @property
    def ind_names(self) -> list:
        return [str(name) for name in self.genotypes.index]

    @property
    def loc_names(self) -> list:
        return [str(name) for name in self.genotypes.columns]

    def as_matrix(self) -> np.ndarray:
        """Return the calls as a float array with NaN for missing values."""
        return self.genotypes.to_numpy(dtype=float, na_value=np.nan)

    def missing_mask(self) -> np.ndarray:
        return np.isnan(self.as_matrix())


def read_genotype_csv(
    genotype_file: str,
    pop_file: Optional[str] = None,
    loc_metrics_file: Optional[str] = None,
    ploidy: int = 2
) -> GenotypeDataset:
    """
    Load a genotype dataset from CSV files.

    Args:
        genotype_file: CSV with individual names in the first column and one column per locus
        pop_file: Optional CSV with 'individual' and 'pop' columns
        loc_metrics_file: Optional CSV with locus names in the first column
        ploidy: 2 for SNP data, 1 for presence/absence data

    Returns:
        GenotypeDataset built from the files
    """
    logging.info(f"Reading genotypes from {genotype_file}")
    genotypes = pd.read_csv(genotype_file, index_col=0)
    genotypes = genotypes.apply(pd.to_numeric, errors="coerce")
    logging.info(f"Read {genotypes.shape[0]} individuals and {genotypes.shape[1]} loci")

    pop = None
    if pop_file:
        pop_df = pd.read_csv(pop_file)
        missing_cols = [col for col in ["individual", "pop"] if col not in pop_df.columns]
        if missing_cols:
            raise DatasetValidationError(f"Population file is missing required columns: {', '.join(missing_cols)}")

        pop_map = pop_df.set_index(pop_df["individual"].astype(str))["pop"]
        names = genotypes.index.astype(str)
        unassigned = [name for name in names if name not in pop_map.index]
        if unassigned:
            raise DatasetValidationError(f"Individuals without a population: {', '.join(unassigned)}")
        pop = pd.Series(pop_map.loc[names].to_numpy(), index=genotypes.index, name="pop")

    loc_metrics = pd.DataFrame()
    if loc_metrics_file:
        loc_metrics = pd.read_csv(loc_metrics_file, index_col=0)
        logging.info(f"Read locus metrics with columns: {', '.join(loc_metrics.columns)}")

    return GenotypeDataset(genotypes=genotypes, loc_metrics=loc_metrics, pop=pop, ploidy=ploidy)
