# -*- coding: utf-8 -*-
# Loftfoil/geometry/ops/__init__.py

"""
Project: Loftfoil
Date: 10/12/2026

Ops Subfolder:
--------------
Lightweight point-array utilities for section outlines and loft meshes.

Contents
--------
- basic:     Duplicate removal, bounding boxes and centres.
- transform: In-plane rotation about z, uniform in-plane scaling, translation.

Public API
----------
Exported functions form the stable interface used by the topology helpers, the
profile façade and the loft builder.
"""

from .basic import (
    drop_consecutive_duplicates, bounding_box, bbox_center,
)
from .transform import rotation_z, rotate_z, scale_xy, translate

__all__ = [
    # basic
    "drop_consecutive_duplicates", "bounding_box", "bbox_center",
    # transform
    "rotation_z", "rotate_z", "scale_xy", "translate",
]
