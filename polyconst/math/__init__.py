"""
Mathematical core of polyconst

- Decoding of digit strings in bases 2 to 36
- Exact rational arithmetic with BigFraction
- Dense rational matrices and Gaussian elimination
- Vandermonde interpolation

All operations are exact; no floating-point arithmetic is involved.
"""

from .big_fraction import BigFraction
from .digits import decode, digit_value, check_base
from .rational_matrix import RationalMatrix
from .gauss import Gauss
from .vandermonde import vandermonde_matrix, solve_vandermonde

__all__ = [
    'BigFraction',
    'decode',
    'digit_value',
    'check_base',
    'RationalMatrix',
    'Gauss',
    'vandermonde_matrix',
    'solve_vandermonde',
]
