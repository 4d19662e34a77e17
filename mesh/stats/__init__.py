# -*- coding: utf-8 -*-
# Loftfoil/mesh/stats/__init__.py

"""
Project: Loftfoil
Date: 10/11/2026

Modules:
--------
- report:    one-shot QA summary of a LoftMesh (counts, extents, area, volume, edges).
- export:    saving the summary to CSV / JSON / Excel.
"""

from .report import summarize
from .export import write_summary_csv, write_summary_json, write_summary_excel

__all__ = ["summarize", "write_summary_csv", "write_summary_json", "write_summary_excel"]
