"""
Reporting module for genotype QC reports.

This module contains functions for printing report tables and saving
report plots.
"""

from genotype_qc.reporting.plot_save import PlotFormat, load_plot, save_plot
