"""
Logging setup for genotype QC reports.
"""

import os
import sys
import logging
import platform
from datetime import datetime
from pathlib import Path
from typing import Optional

import psutil

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


def setup_logging(
    output_dir: Optional[str] = None,
    experiment_name: Optional[str] = None,
    log_file: Optional[str] = None,
    level: int = logging.INFO
) -> Optional[str]:
    """
    Configure logging with console output and optional file output.

    Console messages go to stdout so warnings appear on the same stream
    as the printed reports.

    Args:
        output_dir: Directory to save log files (used together with experiment_name)
        experiment_name: Name of the run for log file naming
        log_file: Direct path to the log file (overrides output_dir and experiment_name)
        level: Logging level for the root logger

    Returns:
        Path to the log file, or None when logging only to the console
    """
    log_file_path = None
    if log_file:
        log_file_path = Path(log_file)
        os.makedirs(log_file_path.parent, exist_ok=True)
    elif output_dir or experiment_name:
        if not output_dir or not experiment_name:
            raise ValueError("Both output_dir and experiment_name must be provided to log to a file")

        os.makedirs(output_dir, exist_ok=True)
        timestamp = datetime.now().strftime('%m-%d-%y_%H-%M')
        log_filename = f"{experiment_name}_report_{timestamp}.log"
        log_file_path = Path(output_dir) / log_filename

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file_path is not None:
        handlers.append(logging.FileHandler(log_file_path))

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=handlers,
        force=True
    )

    if log_file_path is None:
        return None

    logging.info(f"Log file created at: {log_file_path}")
    return str(log_file_path)


def ensure_console_logging(level: int = logging.INFO) -> None:
    """
    Send log messages to stdout when the application has configured no handler.

    Report functions call this so their banners and warnings land on the
    same stream as the printed report when used as a library.
    """
    root_logger = logging.getLogger()
    if root_logger.handlers:
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(handler)
    root_logger.setLevel(level)


def log_system_info():
    """Log system information to help with debugging."""
    logging.info(f"Python version: {sys.version}")
    logging.info(f"Platform: {platform.platform()}")
    logging.info(f"Python executable: {sys.executable}")

    import numpy
    import pandas
    import matplotlib
    import seaborn

    logging.info(f"NumPy version: {numpy.__version__}")
    logging.info(f"Pandas version: {pandas.__version__}")
    logging.info(f"Matplotlib version: {matplotlib.__version__}")
    logging.info(f"Seaborn version: {seaborn.__version__}")

    mem = psutil.virtual_memory()
    logging.info(f"Memory available: {mem.available / (1024**3):.1f} GB of {mem.total / (1024**3):.1f} GB")


def log_input_parameters(parameters: dict):
    """
    Log input parameters for reproducibility.

    Args:
        parameters: Dictionary of input parameters
    """
    if not parameters:
        return

    logging.info("===== Input Parameters =====")
    max_key_length = max(len(str(key)) for key in parameters.keys())

    for key, value in parameters.items():
        logging.info(f"{str(key).ljust(max_key_length + 2)}: {value}")

    logging.info("=============================")
