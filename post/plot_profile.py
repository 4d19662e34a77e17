# -*- coding: utf-8 -*-
# Loftfoil/post/plot_profile.py

"""
Project: Loftfoil
Date: 10/14/2026

Purpose
-------
Quick 2D plot of a generated section: upper and lower surfaces plus the camber line.
"""

from ._backend import _get_pyplot, _finish

__all__ = ["plot_profile"]


def plot_profile(profile, *, show=True, save_path=None, ax=None, title=None):
    """
    Plot an AirfoilProfile.

    Parameters
    ----------
    profile : AirfoilProfile
        Generated profile.
    show : bool, optional
        Display the figure (ignored on non-GUI backends). Default True.
    save_path : str, optional
        If given, save the figure (PNG) to this path.
    ax : matplotlib.axes.Axes, optional
        Draw into an existing axes instead of a new figure.
    title : str, optional
        Defaults to the zero-padded designation.

    Returns
    -------
    matplotlib.axes.Axes
    """
    plt = _get_pyplot()
    owns_figure = ax is None
    if owns_figure:
        fig = plt.figure(figsize=(9, 3.5))
        ax = fig.add_subplot(111)
    else:
        fig = ax.figure

    ax.plot(profile.upper_x, profile.upper_y, "-", lw=1.4, label="Upper")
    ax.plot(profile.lower_x, profile.lower_y, "-", lw=1.4, label="Lower")
    ax.plot(profile.camber_x, profile.camber_y, "--", lw=1.0, label="Camber")
    ax.set_aspect("equal", adjustable="datalim")
    ax.set_xlabel("x")
    ax.set_ylabel("y")
    ax.grid(True, alpha=0.3)
    ax.legend(loc="best")
    ax.set_title(title or "NACA {:0{w}d}".format(profile.designation, w=profile.series))

    _finish(plt, fig, show, save_path, owns_figure)
    return ax
