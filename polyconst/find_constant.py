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
"""Function: reconstructing the constant term of a polynomial (find_constant)"""

from dataclasses import dataclass, field
from typing import List
import logging

from polyconst.exceptions import InputError
from polyconst.math import BigFraction, solve_vandermonde
from polyconst.names import *
from polyconst.parse_input import load_document, parse_keys, parse_shares
from polyconst.polynomial import Polynomial
from polyconst.samples import Sample, decode_samples, select_samples, inconsistent_samples


@dataclass
class ConstantResult:
    """Result of a constant term reconstruction

    Objects of this class are returned by find_constant and are not meant to
    be created by users.

    Attributes:
        polynomial (Polynomial):
            The interpolating polynomial through the selected samples.

        samples (list of Sample):
            The k samples used for interpolation, ascending by x.

        unused (list of Sample):
            Available samples that were not used for interpolation.

        inconsistent (list of Sample):
            Unused samples that do not lie on the polynomial. Only filled when
            find_constant was called with verify=True.
    """
    polynomial: Polynomial
    samples: List[Sample]
    unused: List[Sample] = field(default_factory=list)
    inconsistent: List[Sample] = field(default_factory=list)

    @property
    def constant(self) -> BigFraction:
        return self.polynomial.constant_term

    @property
    def is_integer(self) -> bool:
        return self.constant.is_integer()

    def format(self) -> str:
        """Human readable result line

        'c = <int>' if the constant term is an integer, otherwise
        'c is not an integer: <num>/<den>'.
        """
        c = self.constant
        if c.is_integer():
            return f"c = {c.numerator}"
        return f"c is not an integer: {c.numerator}/{c.denominator}"

    def __str__(self) -> str:
        return self.format()


def constant_term(shares, k: int) -> BigFraction:
    """Constant term of the polynomial through the k lowest-x shares

    Example:
        constant_term([(1, 10, '3'), (2, 10, '7'), (3, 10, '13')], 3) == 1

    Args:
        shares (list of tuples):
            (x, base, value) triples with pairwise distinct x.

        k (int):
            Number of shares to interpolate through.

    Returns:
        (BigFraction): The exact constant term.
    """
    samples, _ = select_samples(decode_samples(shares), k)
    coeffs = solve_vandermonde([s.x for s in samples], [s.y for s in samples])
    return coeffs[-1]


def find_constant(document, **kwargs) -> ConstantResult:
    """Reconstruct the constant term from a share document

    The shares of the document are decoded, sorted by x-coordinate and the
    k shares with the lowest x are used to interpolate a polynomial of degree
    k-1 with exact rational arithmetic. Its constant term is the result.

    Example:
        result = find_constant('shares.json', verify=True)
        print(result)

    Args:
        document (str, PathLike, file object or dict):
            The share document or a path to it (see load_document).

        k (int): (Default: value of keys.k in the document)
            Number of shares to interpolate through.

        verify (bool): (Default: False)
            Evaluate the polynomial at all shares that were not used for
            interpolation and report the ones that do not match.

    Returns:
        (ConstantResult):
        The polynomial, the samples used and the constant term.
    """
    allowed_keys = {K, VERIFY}
    for key in kwargs:
        if key not in allowed_keys:
            raise InputError("Key " + key + " is not supported.")

    document = load_document(document)
    n, k = parse_keys(document)
    if K in kwargs and kwargs[K] is not None:
        k = kwargs[K]
    verify = kwargs.get(VERIFY, False)

    shares = parse_shares(document)
    if n != len(shares):
        logging.warning(f"Share document declares n={n} but contains {len(shares)} shares.")
    logging.info(f"Decoding {len(shares)} shares.")
    samples = decode_samples(shares)

    selected, unused = select_samples(samples, k)
    logging.info(f"Interpolating through {k} shares at x = {[s.x for s in selected]}.")
    coeffs = solve_vandermonde([s.x for s in selected], [s.y for s in selected])
    polynomial = Polynomial(coeffs)
    logging.info(f"  Polynomial: {polynomial}")

    result = ConstantResult(polynomial, selected, unused)
    if verify:
        logging.info(f"Verifying {len(unused)} unused shares.")
        result.inconsistent = inconsistent_samples(polynomial, unused)
        if not result.inconsistent:
            logging.info("  All unused shares are consistent.")
    if not result.is_integer:
        logging.warning(f"Constant term {result.constant} is not an integer.")
    return result
