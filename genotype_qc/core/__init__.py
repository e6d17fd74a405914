"""
Core utilities for genotype QC reports: configuration, logging, validation,
working directory handling and the dataset container.
"""
