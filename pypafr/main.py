#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
pypafr command line interface

A small script that:
1. Reads a PAF alignment file
2. Optionally removes secondary alignments using the 'tp' tag
3. Prints a summary of the alignments
4. Optionally lists sequence lengths and summarizes a BED interval file

This module serves as the entry point for the `pypafr` console script.
"""

import sys
import argparse
import logging

# Import package modules
from .config import Config, setup_logging, PafrError, FileError
from .core import filter_secondary_alignments
from .utils import read_paf, read_bed

# Set up module logger
logger = logging.getLogger(__name__)


#############################################################################
#                          Command Line Argument Parsing
#############################################################################

def parse_arguments(argv=None):
    """
    Parse command line arguments.

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        prog='pypafr',
        description='pypafr: read and summarize PAF alignment files',
    )

    option_group = parser.add_argument_group('options')

    option_group.add_argument('--debug', nargs='*', metavar='MODULE',
                              help='Enable debug mode. Use without arguments for universal debug, '
                                   'or specify module names (e.g. "--debug tag_decoder").')
    option_group.add_argument('--config', metavar='[.json]',
                              help='JSON configuration file.')
    option_group.add_argument('--filter-secondary', action='store_true',
                              help='Remove secondary alignments (requires the tp tag).')
    option_group.add_argument('--remove-inversions', action='store_true',
                              help='With --filter-secondary, also remove inversions.')
    option_group.add_argument('--sizes', choices=['query', 'target'],
                              help='Print sequence names and lengths for one axis.')
    option_group.add_argument('--bed', metavar='[.bed]',
                              help='BED interval file to summarize alongside the alignments.')
    option_group.add_argument('--log-dir', metavar='<log_dir>',
                              help='Directory for log files (default: ~/.pypafr/logs).')

    parser.add_argument('paf', metavar='[.paf, .paf.gz]', help='PAF alignment file')

    args = parser.parse_args(argv)

    if args.debug is not None:
        args.debug = True if len(args.debug) == 0 else args.debug
    else:
        args.debug = False

    if args.remove_inversions and not args.filter_secondary:
        parser.error("--remove-inversions can only be used with --filter-secondary")

    return args


#############################################################################
#                          Main Execution
#############################################################################

def run(argv=None):
    """
    Run the command line workflow.

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Returns:
        True if the run completed successfully, False otherwise
    """
    args = parse_arguments(argv)

    try:
        setup_logging(debug=args.debug, log_dir=args.log_dir)

        if args.config:
            try:
                Config.load_from_file(args.config)
            except FileNotFoundError as e:
                raise FileError(str(e)) from e

        table = read_paf(args.paf)

        if args.filter_secondary:
            before = table.row_count
            table = filter_secondary_alignments(table, remove_inversions=args.remove_inversions)
            logger.info(f"Removed {before - table.row_count} secondary alignments")

        print(table)

        if args.sizes:
            sizes = table.sequence_lengths(args.sizes)
            print(sizes.to_string(index=False))

        if args.bed:
            intervals = read_bed(args.bed)
            print(f"{len(intervals)} intervals on {intervals['chrom'].nunique()} sequences")

        return True

    except PafrError as e:
        logger.error(f"pypafr error: {str(e)}")
        return False


#############################################################################
#                              Entry Point
#############################################################################

def main():
    """
    Entry point for the console script.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    success = run()
    sys.exit(0 if success else 1)


if __name__ == "__main__":
    main()
