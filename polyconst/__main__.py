#!/usr/bin/env python3
#
# Copyright 2022 Max Planck Insitute Magdeburg
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
#
#
"""Command line entry point of polyconst"""

from argparse import ArgumentParser
from argparse import RawDescriptionHelpFormatter
import logging
import sys

from polyconst.exceptions import PolyConstError
from polyconst.find_constant import find_constant
from polyconst.plotting import plot_polynomial


def start(inputfile, k=None, verify=False, plot=False):
    """
    Reconstruct the constant term of the shares in inputfile and print it.

    :param inputfile: path to the JSON share document
    :param k: number of shares to use, overrides the document's keys.k
    :param verify: check the unused shares against the polynomial
    :param plot: show a plot of the polynomial
    :return: exit status
    """
    try:
        result = find_constant(inputfile, k=k, verify=verify)
    except (PolyConstError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    print(result.format())
    if verify and result.inconsistent:
        print(f"{len(result.inconsistent)} unused shares are inconsistent: x = {[s.x for s in result.inconsistent]}")
    if plot:
        try:
            plot_polynomial(result.polynomial, result.samples)
        except OverflowError as e:
            logging.warning(f"Skipping plot, values exceed the float range: {e}")
    return 0


def start_from_command_line(argv=None):
    """
    Entry point of polyconst. Parses the command line and calls start.

    :param argv: argument list, defaults to sys.argv[1:]
    :return: None
    """
    usage = '''usage: polyconst -i <shares>.json [-k K] [--verify] [--plot] [-v]'''
    parser = ArgumentParser(prog='polyconst', description='Reconstruct the constant term of a polynomial from shares\n'
                                                          'given as digit strings in bases 2 to 36,\n'
                                                          'using exact rational arithmetic', epilog=usage,
                            formatter_class=RawDescriptionHelpFormatter)
    parser.add_argument("-i", "--input", help="path to input JSON share document")
    parser.add_argument("-k", type=int, default=None, help="number of shares to use (default: keys.k of the document)")
    parser.add_argument("--verify", action='store_true', help="check that unused shares lie on the polynomial")
    parser.add_argument("--plot", action='store_true', help="plot the reconstructed polynomial")
    parser.add_argument("-v", "--verbose", action='store_true', help="print progress information")
    argv = sys.argv[1:] if argv is None else argv
    if len(argv) == 0:
        parser.print_help(sys.stderr)
        sys.exit(1)
    args = parser.parse_args(argv)
    if args.input is None:
        parser.error("the following arguments are required: -i/--input")
    logging.basicConfig(format='%(levelname)s: %(message)s', level=logging.INFO if args.verbose else logging.WARNING)
    sys.exit(start(args.input, args.k, args.verify, args.plot))


if __name__ == "__main__":
    start_from_command_line()
