"""
cml parsing
"""

import argparse

from ..params import START_DESCR


def parse(argv=None) -> argparse.Namespace:
    """
    Process commandline arguments

    NOTE: root and mode are not required here, missing values are asked for interactively.
    """

    parser = argparse.ArgumentParser(
        description=START_DESCR,
        prog="xtbbatch",
    )

    groups = []

    # RUN SETTINGS
    groups.append(parser.add_argument_group("RUN SETTINGS"))
    groups[0].add_argument(
        "-r",
        "--root",
        dest="root",
        type=str,
        help="Folder that is searched recursively for *.xyz files.",
    )
    groups[0].add_argument(
        "-m",
        "--mode",
        dest="mode",
        type=str.lower,
        help="Calculation to run: 'opt' (geometry optimization), 'ohess' (optimization + Hessian) "
        "or 'hess' (Hessian on xtbopt.xyz files of earlier optimizations).",
    )
    groups[0].add_argument(
        "-O",
        "--omp",
        dest="omp",
        type=int,
        help="Number of threads per xtb calculation, passed on via --parallel.",
    )
    groups[0].add_argument(
        "--xtb",
        dest="xtb",
        type=str,
        help="Path to the xtb binary. If not given it is searched in PATH.",
    )
    groups[0].add_argument(
        "--inprc",
        dest="inprcpath",
        help="Use to provide a path to the configuration file if you want to use a different one"
        " than the default (~/.xtbbatchrc).",
    )
    groups[0].add_argument(
        "--new-config",
        dest="writeconfig",
        action="store_true",
        help="Write new configuration file, which is placed into the current directory.",
    )
    groups[0].add_argument(
        "-v",
        "--version",
        dest="version",
        action="store_true",
        help="Print xtbbatch version and exit.",
    )

    # LOGGING
    groups.append(parser.add_argument_group("LOGGING"))
    groups[1].add_argument(
        "--loglevel",
        dest="loglevel",
        default="INFO",
        help="Set the loglevel for all modules to a specified level.",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
    )
    groups[1].add_argument(
        "--logpath",
        dest="logpath",
        help="Path of the log file. Defaults to xtbbatch.log in the root folder.",
    )

    return parser.parse_args(argv)
