"""
File and directory handling utilities for genotype QC reports.
"""

import os
import logging
import tempfile
from pathlib import Path
from typing import Optional, Union


def check_working_dir(
    wd: Optional[Union[str, Path]] = None,
    default_dir: Optional[str] = None,
    verbose: int = 2
) -> str:
    """
    Resolve the working directory used to save report plots.

    The directory is taken from the explicit argument, else from the
    configured default. A path that does not exist falls back to the system
    temp directory with a warning.

    Args:
        wd: Directory requested by the caller
        default_dir: Configured default working directory
        verbose: Verbosity level

    Returns:
        Path of the directory to use
    """
    if wd is None:
        wd = default_dir
    if wd is None:
        return tempfile.gettempdir()

    if isinstance(wd, (str, Path)) and os.path.isdir(wd):
        return str(wd)

    if verbose >= 1:
        logging.warning("Warning: The path to the working directory does not exist! Set to tempdir().")
    return tempfile.gettempdir()


def ensure_output_dir(output_dir: str) -> None:
    """
    Ensure the output directory exists, creating it if necessary.

    Args:
        output_dir: Directory to create
    """
    os.makedirs(output_dir, exist_ok=True)
