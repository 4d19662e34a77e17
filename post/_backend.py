# -*- coding: utf-8 -*-
# Loftfoil/post/_backend.py

"""
Project: Loftfoil
Date: 10/14/2026

Purpose
-------
Shared matplotlib plumbing for the QA plots: lazy, headless-safe pyplot import and the
save/show/close epilogue.
"""

import logging
import os

logger = logging.getLogger(__name__)


def _get_pyplot():
    """
    Import matplotlib.pyplot with a headless-safe backend if needed.

    Raises
    ------
    RuntimeError
        If matplotlib cannot be imported.
    """
    try:
        import matplotlib
        # Choose Agg when DISPLAY is not set to avoid GUI backend errors in headless/CI.
        if not os.environ.get("DISPLAY"):
            matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError("matplotlib is required for plotting: {}".format(e))


def _finish(plt, fig, show, save_path, owns_figure):
    """Save if requested; show on interactive backends, otherwise close figures we created."""
    if save_path:
        folder = os.path.dirname(os.path.abspath(save_path))
        os.makedirs(folder, exist_ok=True)
        fig.savefig(save_path, dpi=200, bbox_inches="tight")
        logger.info("[Post] Plot saved to: %s", save_path)

    backend = plt.get_backend().lower()
    if show and not backend.startswith("agg"):
        plt.show()
    elif owns_figure:
        plt.close(fig)
