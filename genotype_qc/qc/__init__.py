"""
Quality control reports for genotype datasets.

This module provides tools for:
1. Call rate reports by locus or by individual
2. Tag length reports with quantile filtering thresholds
"""

from genotype_qc.qc.report_callrate import report_callrate
from genotype_qc.qc.report_taglength import report_taglength
