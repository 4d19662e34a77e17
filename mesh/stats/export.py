# -*- coding: utf-8 -*-
# Loftfoil/mesh/stats/export.py

"""
Project: Loftfoil
Date: 10/11/2026

Purpose:
--------
Export summary statistics (nested dictionaries/lists) to CSV and JSON. Nested keys are
flattened to dot paths for CSV; numpy scalars are converted to plain Python values.

Main Tasks:
-----------
    1. Flatten nested dictionaries into ("dot.path.key", value) rows.
    2. Export summary data as:
        - CSV: 2-column "key,value" table.
        - JSON: structured, indented JSON.
        - Excel: single-sheet file (pandas, optional extra).
    3. Write CSV/JSON through a temporary file in the target folder and rename into place.
"""

import csv
import io
import json
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, List, Tuple
import numpy as np

__all__ = ["flatten", "write_summary_csv", "write_summary_json", "write_summary_excel"]


def _is_scalar(x: Any) -> bool:
    return isinstance(x, (str, bool, int, float, np.generic)) or x is None


def _default(o: Any) -> Any:
    if isinstance(o, np.generic):
        return o.item()
    if isinstance(o, np.ndarray):
        return o.tolist()
    return str(o)


def _to_json_str(x: Any) -> str:
    return json.dumps(x, default=_default, ensure_ascii=False)


def _flatten(prefix: str, obj: Any, out: List[Tuple[str, Any]]) -> None:
    """
    Recursively flatten nested dictionaries into (key_path, value) rows.

    Scalars are stored as-is; dicts recurse in sorted key order; lists, tuples and
    arrays are stored as a JSON string.
    """
    if _is_scalar(obj):
        out.append((prefix, obj.item() if isinstance(obj, np.generic) else obj))
        return
    if isinstance(obj, dict):
        for k in sorted(obj.keys()):
            key = str(k)
            _flatten(key if prefix == "" else "{}.{}".format(prefix, key), obj[k], out)
        return
    out.append((prefix, _to_json_str(obj)))


def flatten(summary: Dict[str, Any]) -> List[Tuple[str, Any]]:
    """Flattened ("dot.path.key", value) rows of a summary."""
    rows: List[Tuple[str, Any]] = []
    _flatten("", summary, rows)
    return rows


def _atomic_write(text: str, path: str) -> str:
    p = Path(path)
    if not p.parent.exists():
        p.parent.mkdir(parents=True)
    tf = tempfile.NamedTemporaryFile("w", encoding="utf-8", newline="",
                                     dir=str(p.parent), delete=False)
    try:
        tf.write(text)
        tmp_name = tf.name
    finally:
        tf.close()
    os.replace(tmp_name, str(p))
    return str(p)


def write_summary_csv(summary: Dict[str, Any], path: str) -> str:
    """
    Write a summary dictionary to a 2-column CSV file ("key,value").

    Returns
    -------
    str
        Written file path.
    """
    buf = io.StringIO()
    w = csv.writer(buf)
    w.writerow(["key", "value"])
    for k, v in flatten(summary):
        w.writerow([k, v])
    return _atomic_write(buf.getvalue(), path)


def write_summary_json(summary: Dict[str, Any], path: str, indent: int = 2) -> str:
    """
    Write a summary dictionary to a JSON file.

    Returns
    -------
    str
        Written file path.
    """
    text = json.dumps(summary, indent=indent, default=_default, ensure_ascii=False) + "\n"
    return _atomic_write(text, path)


def write_summary_excel(summary: Dict[str, Any], path: str) -> str:
    """
    Write a summary dictionary to a single-sheet Excel file ("key", "value" columns).

    Requires the `excel` extra (pandas + openpyxl).

    Returns
    -------
    str
        Written file path.
    """
    import pandas as pd

    df = pd.DataFrame(flatten(summary), columns=["key", "value"])
    p = Path(path)
    if not p.parent.exists():
        p.parent.mkdir(parents=True)
    df.to_excel(str(p), index=False)
    return str(p)
