"""
Save report charts to disk.

Every save writes a pickled ChartSpec snapshot that can be reloaded with
load_plot(). Image and vector types additionally render the figure with
matplotlib.
"""

import os
import pickle
import logging
import tempfile
from enum import Enum
from typing import Dict, Optional

import matplotlib.pyplot as plt

from genotype_qc.core.utils import retry_operation
from genotype_qc.core.validation import UnknownPlotFormatError
from genotype_qc.qc.plot_quality import ChartSpec

SNAPSHOT_EXTENSION = "pkl"


class PlotFormat(Enum):
    """Acceptable plot save types, valued by file extension."""
    PICKLE = "pkl"
    EPS = "eps"
    PS = "ps"
    PDF = "pdf"
    PNG = "png"
    SVG = "svg"
    JPEG = "jpg"
    TIFF = "tiff"

    @property
    def extension(self) -> str:
        return self.value

    @property
    def is_rendered(self) -> bool:
        return self is not PlotFormat.PICKLE

    @classmethod
    def from_tag(cls, tag: str) -> "PlotFormat":
        """Map a user supplied type tag to a PlotFormat."""
        try:
            return _TAGS[str(tag).lower()]
        except KeyError:
            raise UnknownPlotFormatError(
                f"Type specified as {tag} but not included in list of acceptable types "
                f"({', '.join(sorted(_TAGS))})"
            ) from None


_TAGS = {
    "pickle": PlotFormat.PICKLE,
    "pkl": PlotFormat.PICKLE,
    "rds": PlotFormat.PICKLE,
    "eps": PlotFormat.EPS,
    "ps": PlotFormat.PS,
    "pdf": PlotFormat.PDF,
    "png": PlotFormat.PNG,
    "svg": PlotFormat.SVG,
    "jpeg": PlotFormat.JPEG,
    "jpg": PlotFormat.JPEG,
    "tiff": PlotFormat.TIFF,
    "tif": PlotFormat.TIFF,
}


@retry_operation(max_attempts=3, delay=1)
def _write_snapshot(chart: ChartSpec, filespec: str) -> None:
    with open(filespec, "wb") as f:
        pickle.dump(chart, f)


@retry_operation(max_attempts=3, delay=1)
def _write_image(chart: ChartSpec, filespec: str, plot_format: PlotFormat, **savefig_kwargs) -> None:
    fig = chart.render()
    try:
        fig.savefig(filespec, format=plot_format.extension, **savefig_kwargs)
    finally:
        plt.close(fig)


def save_plot(
    chart: ChartSpec,
    directory: Optional[str] = None,
    file: Optional[str] = None,
    plot_type: str = "pickle",
    verbose: int = 2,
    **savefig_kwargs
) -> Dict[str, str]:
    """
    Save a report chart as a pickle snapshot and, if requested, an image.

    Args:
        chart: Chart to save
        directory: Directory to save into (temp directory if missing or nonexistent)
        file: File name without extension
        plot_type: Save type tag, e.g. "pickle", "RDS", "png", "pdf", "svg"
        verbose: Verbosity level
        **savefig_kwargs: Passed to Figure.savefig, such as dpi

    Returns:
        Dictionary of written file paths keyed by "snapshot" and "image"
    """
    try:
        plot_format = PlotFormat.from_tag(plot_type)
    except UnknownPlotFormatError as e:
        logging.warning(f"  {e}")
        logging.warning("    No plot saved")
        return {}

    if not isinstance(chart, ChartSpec):
        logging.warning(f"  {type(chart).__name__} is not a ChartSpec, no plot saved")
        return {}

    if not file:
        logging.warning("  No file name provided for the plot file. No plot saved")
        return {}

    if directory is None:
        directory = tempfile.gettempdir()
    elif not os.path.isdir(directory):
        logging.warning(
            f"  Directory {directory} to receive the saved plot file does not exist. Defaulting to tempdir()"
        )
        directory = tempfile.gettempdir()

    output_files = {}

    snapshot_file = os.path.join(directory, f"{file}.{SNAPSHOT_EXTENSION}")
    _write_snapshot(chart, snapshot_file)
    output_files["snapshot"] = snapshot_file
    if verbose >= 2:
        logging.info(f"  Plot object saved as pickle to {snapshot_file}")

    if plot_format.is_rendered:
        image_file = os.path.join(directory, f"{file}.{plot_format.extension}")
        _write_image(chart, image_file, plot_format, **savefig_kwargs)
        output_files["image"] = image_file
        if verbose >= 2:
            logging.info(f"  Plot saved as {plot_format.extension} to {image_file}")

    return output_files


def load_plot(path: str) -> ChartSpec:
    """
    Reload a chart saved by save_plot().

    Args:
        path: Path to a .pkl snapshot

    Returns:
        The saved ChartSpec
    """
    with open(path, "rb") as f:
        chart = pickle.load(f)

    if not isinstance(chart, ChartSpec):
        raise TypeError(f"{path} does not contain a saved report chart")
    return chart
