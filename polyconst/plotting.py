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
"""Plotting of reconstructed polynomials"""

from typing import List
from numpy import linspace, zeros_like
import matplotlib.pyplot as plt
from matplotlib import use as set_matplotlib_backend

from polyconst.names import *
from polyconst.polynomial import Polynomial
from polyconst.samples import Sample


def plot_polynomial(polynomial: Polynomial, samples: List[Sample], **kwargs):
    """Plot a reconstructed polynomial together with its samples

    The curve is drawn over the x-range of the samples, extended to include
    the origin, where the constant term is marked. The curve is sampled in
    floating point for drawing only; the marked constant term is the exact
    value converted to float.

    Example:
        result = find_constant('shares.json')
        plot_polynomial(result.polynomial, result.samples, plt_backend='Agg', show=False)

    Args:
        polynomial (Polynomial):
            The polynomial to draw.

        samples (list of Sample):
            Points to mark on the curve.

        points (int): (Default: 200)
            Number of points used to draw the curve.

        plt_backend (str): (Default: current backend)
            The matplotlib backend that should be used for plotting, e.g.
            'Agg' or 'template' for non-interactive use.

        show (bool): (Default: True)
            Should matplotlib show the plot or should it stop after plot
            generation.

    Returns:
        (matplotlib.figure.Figure): The generated figure.
    """
    if PLT_BACKEND in kwargs:
        set_matplotlib_backend(kwargs[PLT_BACKEND])
    show = kwargs.get(SHOW, True)
    points = kwargs.get(POINTS, 200)
    if points < 2:
        raise ValueError(f"At least 2 points are needed to draw a curve, got {points}.")

    xs = [s.x for s in samples] + [0]
    x_min, x_max = min(xs), max(xs)
    if x_min == x_max:
        x_min, x_max = x_min - 1, x_max + 1
    coeffs = [float(c) for c in polynomial.coefficients]
    grid = linspace(x_min, x_max, points)
    curve = zeros_like(grid)
    for c in coeffs:
        curve = curve * grid + c

    fig, ax = plt.subplots()
    ax.plot(grid, curve, label=str(polynomial))
    ax.scatter([s.x for s in samples], [float(s.y) for s in samples], color='tab:orange', zorder=3, label='samples')
    ax.scatter([0], [float(polynomial.constant_term)], color='tab:red', marker='x', zorder=3,
               label=f'c = {polynomial.constant_term}')
    ax.set_xlabel('x')
    ax.set_ylabel('y')
    ax.legend()
    if show:
        plt.show()
    return fig
