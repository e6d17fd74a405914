#!/usr/bin/env python3
"""
Run genotype QC reports from the command line.

Examples:
    genotype-qc-report callrate genotypes.csv --pop-file pops.csv --method ind
    genotype-qc-report taglength genotypes.csv --loc-metrics loci.csv --plot-file taglength --plot-type png
"""

import sys
import logging
import argparse

from genotype_qc.core.config import DEFAULT_IND_TO_LIST, DEFAULT_PLOT_THEME, DEFAULT_SETTINGS
from genotype_qc.core.dataset import read_genotype_csv
from genotype_qc.core.file_handling import ensure_output_dir
from genotype_qc.core.logging_setup import setup_logging
from genotype_qc.core.validation import GenotypeQCError
from genotype_qc.qc.report_callrate import report_callrate
from genotype_qc.qc.report_taglength import report_taglength


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Report call rate or tag length for a genotype dataset")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("genotype_file", help="CSV of calls, individuals as rows and loci as columns")
    common.add_argument("--pop-file", help="CSV with 'individual' and 'pop' columns")
    common.add_argument("--loc-metrics", help="CSV of locus metrics, locus names in the first column")
    common.add_argument("--ploidy", type=int, choices=[1, 2], default=2,
                        help="2 for SNP data, 1 for presence/absence data (default: 2)")
    common.add_argument("--bins", type=int, default=50, help="Number of histogram bins (default: 50)")
    common.add_argument("--plot-theme", default=DEFAULT_PLOT_THEME, help="Seaborn axes style for the plot")
    common.add_argument("--plot-colors", nargs='+', help="Border and fill colors")
    common.add_argument("--plot-dir", help="Directory to save the plot (default: working directory or tempdir)")
    common.add_argument("--plot-file", help="File name for the saved plot, without extension")
    common.add_argument("--plot-type", default="pickle", help="Save type: pickle, png, pdf, svg, eps, ps, jpeg, tiff")
    common.add_argument("--no-display", action="store_true", help="Do not show the plot window")
    common.add_argument("-v", "--verbose", type=int, default=None,
                        help=f"Verbosity 0-5 (default: {DEFAULT_SETTINGS.verbosity})")
    common.add_argument("--log-file", help="Also write log messages to this file")

    subparsers = parser.add_subparsers(dest="report", required=True)

    callrate = subparsers.add_parser("callrate", parents=[common], help="Report call rate by locus or individual")
    callrate.add_argument("--method", choices=["loc", "ind"], default="loc",
                          help="Report by locus or by individual (default: loc)")
    callrate.add_argument("--ind-to-list", type=int, default=DEFAULT_IND_TO_LIST,
                          help=f"Number of lowest call rate individuals to list (default: {DEFAULT_IND_TO_LIST})")

    subparsers.add_parser("taglength", parents=[common], help="Report sequence tag length across loci")

    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)
    setup_logging(log_file=args.log_file)

    if args.plot_dir:
        ensure_output_dir(args.plot_dir)

    try:
        dataset = read_genotype_csv(
            args.genotype_file,
            pop_file=args.pop_file,
            loc_metrics_file=args.loc_metrics,
            ploidy=args.ploidy
        )

        options = dict(
            plot_display=not args.no_display,
            plot_theme=args.plot_theme,
            plot_colors=args.plot_colors,
            plot_dir=args.plot_dir,
            plot_file=args.plot_file,
            plot_type=args.plot_type,
            bins=args.bins,
            verbose=args.verbose,
        )

        if args.report == "callrate":
            report_callrate(dataset, method=args.method, ind_to_list=args.ind_to_list, **options)
        else:
            report_taglength(dataset, **options)
    except (GenotypeQCError, ValueError, FileNotFoundError) as e:
        logging.error(str(e))
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
