"""
Genotype QC Reports

Call rate and tag length reports for SNP and presence/absence (SilicoDArT) datasets.
"""

__version__ = '0.1.0'

from genotype_qc.core.dataset import GenotypeDataset, read_genotype_csv
from genotype_qc.qc.report_callrate import report_callrate
from genotype_qc.qc.report_taglength import report_taglength
