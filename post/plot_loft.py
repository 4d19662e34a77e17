# -*- coding: utf-8 -*-
# Loftfoil/post/plot_loft.py

"""
Project: Loftfoil
Date: 10/14/2026

Purpose
-------
Quick 3D wireframe of a LoftMesh, with optional down-sampling for very large meshes.
"""

import numpy as np
from ._backend import _get_pyplot, _finish

__all__ = ["plot_loft"]


def plot_loft(mesh, *, show=True, save_path=None, ax=None, linewidth=0.2, max_triangles=None):
    """
    Plot a LoftMesh as a triangle wireframe.

    Parameters
    ----------
    mesh : LoftMesh
        Lofted mesh.
    show : bool, optional
        Display the figure (ignored on non-GUI backends). Default True.
    save_path : str, optional
        If given, save the figure (PNG) to this path.
    ax : mpl_toolkits.mplot3d.Axes3D, optional
        Draw into an existing 3D axes instead of a new figure.
    linewidth : float, optional
        Edge line width.
    max_triangles : int, optional
        If set, plot every k-th triangle so at most this many are drawn.

    Returns
    -------
    Axes3D
    """
    plt = _get_pyplot()
    from mpl_toolkits.mplot3d.art3d import Poly3DCollection

    owns_figure = ax is None
    if owns_figure:
        fig = plt.figure(figsize=(8, 6))
        ax = fig.add_subplot(111, projection="3d")
    else:
        fig = ax.figure

    P = np.asarray(mesh.positions)
    T = np.asarray(mesh.indices)
    if max_triangles is not None and T.shape[0] > max_triangles > 0:
        T = T[::int(np.ceil(T.shape[0] / max_triangles))]

    # plot span (z) on the horizontal axis, thickness (y) vertical
    Q = P[:, [0, 2, 1]]
    ax.add_collection3d(Poly3DCollection(Q[T], facecolors=(0.8, 0.8, 0.85, 0.15),
                                         edgecolors="k", linewidths=linewidth))

    lo, hi = P.min(axis=0), P.max(axis=0)
    ax.set_xlim(lo[0], hi[0])
    ax.set_ylim(lo[2], hi[2])
    ax.set_zlim(lo[1], hi[1])
    ax.set_box_aspect(tuple(np.maximum(hi - lo, 1e-9)[[0, 2, 1]]))
    ax.set_xlabel("x (chord)")
    ax.set_ylabel("z (span)")
    ax.set_zlabel("y")
    ax.set_title("Loft: {} vertices / {} triangles".format(mesh.n_vertices, mesh.n_triangles))

    _finish(plt, fig, show, save_path, owns_figure)
    return ax
