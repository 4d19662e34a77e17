import os

import matplotlib
import pytest

from geometry.naca.profile import generate
from mesh.core import loft


@pytest.fixture(autouse=True)
def headless(monkeypatch):
    monkeypatch.delenv("DISPLAY", raising=False)


def test_plot_profile_saves_png(tmp_path):
    from post import plot_profile

    out = tmp_path / "plots" / "profile.png"
    ax = plot_profile(generate(2412, station_count=40), show=False, save_path=str(out))
    assert out.exists() and os.path.getsize(str(out)) > 0
    assert matplotlib.get_backend().lower() == "agg"
    assert ax.get_title() == "NACA 2412"
    assert len(ax.get_lines()) == 3


def test_plot_profile_into_existing_axes():
    from matplotlib.figure import Figure
    from post import plot_profile

    ax = Figure().add_subplot(111)
    returned = plot_profile(generate(12, station_count=20), show=False, ax=ax, title="root")
    assert returned is ax
    assert ax.get_title() == "root"


def test_plot_loft_saves_png(tmp_path):
    from post import plot_loft

    profile = generate(12, station_count=20)
    mesh = loft(profile.closed_polygon(), span=1.0, span_segments=4, twist_deg=10.0)
    out = tmp_path / "loft.png"
    plot_loft(mesh, show=False, save_path=str(out), max_triangles=50)
    assert out.exists() and os.path.getsize(str(out)) > 0
