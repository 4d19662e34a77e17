# -*- coding: utf-8 -*-
# Loftfoil/main.py

"""
End-to-end driver:
  1) Resolve settings (defaults + optional JSON file given on the command line)
  2) Generate the NACA section (+ preview)
  3) Loft it into a triangulated wing segment
  4) Mesh QA summary (CSV/JSON)
  5) Export via meshio (+ wireframe preview)
"""

import os
import logging
import sys

from config import build_settings, load_settings, profile_options, loft_parameters
from geometry.api import generate_profile, polygon_from_profile
from mesh.api import build_loft
from mesh.io import write_mesh
from mesh.stats import summarize, write_summary_csv, write_summary_json
from post import plot_profile, plot_loft


if __name__ == "__main__":
    # ------------------------------------------------------------------
    # 0) Logging
    # ------------------------------------------------------------------
    logging.basicConfig(level=logging.INFO, format="%(levelname)s:%(name)s:%(message)s")
    log = logging.getLogger("Loftfoil")

    out_dir = "out"
    os.makedirs(out_dir, exist_ok=True)

    # ------------------------------------------------------------------
    # 1) Settings: GUI defaults, overridden by a JSON file if one is given
    #    e.g. {"naca": "23012", "span": 2.0, "twist": 5, "enableScale": true, "tipScale": 0.6}
    # ------------------------------------------------------------------
    cfg = load_settings(sys.argv[1]) if len(sys.argv) > 1 else build_settings({
        "naca": "2412",
        "sections": 120,
        "span": 1.5,
        "twist": 4.0,
        "enableScale": True,
        "tipScale": 0.6,
        "aoa": 2.0,
    })
    log.info("Settings: %s", cfg)

    # ------------------------------------------------------------------
    # 2) Section
    # ------------------------------------------------------------------
    profile = generate_profile(cfg["designation"], profile_options(cfg))
    plot_profile(profile, show=False, save_path=os.path.join(out_dir, "profile.png"))

    # ------------------------------------------------------------------
    # 3) Loft
    # ------------------------------------------------------------------
    mesh = build_loft(polygon_from_profile(profile), loft_parameters(cfg))

    # ------------------------------------------------------------------
    # 4) Mesh QA summary
    # ------------------------------------------------------------------
    summary = summarize(mesh)
    log.info("Mesh summary:\n%s", summary)
    csv_path = write_summary_csv(summary, os.path.join(out_dir, "summary.csv"))
    json_path = write_summary_json(summary, os.path.join(out_dir, "summary.json"))

    if cfg["span"] > 0.0 and not summary["watertight"]:
        log.warning("Loft is not watertight: %s", summary["edges"])

    # ------------------------------------------------------------------
    # 5) Export + preview
    # ------------------------------------------------------------------
    obj_path = write_mesh(mesh, os.path.join(out_dir, "wing.obj"))
    try:
        plot_loft(mesh, show=False, save_path=os.path.join(out_dir, "loft.png"), max_triangles=20000)
    except RuntimeError as e:
        log.warning("Skipping loft preview: %s", e)

    print("Artifacts written:")
    print(" - OBJ :", obj_path)
    print(" - CSV :", csv_path)
    print(" - JSON:", json_path)
