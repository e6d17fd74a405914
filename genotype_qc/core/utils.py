"""
Utility functions for genotype QC reports.
"""

import time
import functools
import logging


# Retry decorator for operations that might fail temporarily
def retry_operation(max_attempts: int = 3, delay: float = 1,
                    error_types: tuple = (OSError,)):
    """
    Decorator that retries a function if it fails with specified error types.

    Args:
        max_attempts: Maximum number of retry attempts
        delay: Delay between retries in seconds
        error_types: Tuple of exception types to catch and retry

    Returns:
        Decorated function that will retry on failure
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            attempts = 0

            while True:
                try:
                    return func(*args, **kwargs)
                except error_types as e:
                    attempts += 1

                    if attempts >= max_attempts:
                        logging.error(f"Operation failed after {max_attempts} attempts: {e}")
                        raise

                    logging.warning(f"Operation failed (attempt {attempts}/{max_attempts}), "
                                    f"retrying in {delay} seconds: {e}")
                    time.sleep(delay)

        return wrapper
    return decorator


def flag_start(func_name: str, datatype: str, verbose: int) -> None:
    """Log the start banner of a report function."""
    if verbose >= 1:
        logging.info(f"Starting {func_name}")
    if verbose >= 2:
        logging.info(f"  Processing genotype dataset with {datatype} data")


def flag_end(func_name: str, verbose: int) -> None:
    """Log the completion banner of a report function."""
    if verbose >= 1:
        logging.info(f"Completed: {func_name}")
