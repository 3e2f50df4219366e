# tests/test_ephemeris.py

from pathlib import Path

import pytest

from solarhijri.ephemeris import skyfield_astronomy as sa


def test_data_dir(monkeypatch, tmp_path):
    monkeypatch.setenv("SOLARHIJRI_DATA_DIR", str(tmp_path))
    assert sa._data_dir() == tmp_path
    monkeypatch.delenv("SOLARHIJRI_DATA_DIR")
    assert sa._data_dir() == Path.home() / ".cache" / "solarhijri"


def test_resolve_ephemeris(monkeypatch, tmp_path):
    monkeypatch.delenv("SOLARHIJRI_EPHEMERIS", raising=False)
    assert sa._resolve_ephemeris(None) == sa.DEFAULT_EPHEMERIS

    monkeypatch.setenv("SOLARHIJRI_EPHEMERIS", "de440s.bsp")
    assert sa._resolve_ephemeris(None) == "de440s.bsp"

    kernel = tmp_path / "mine.bsp"
    kernel.write_bytes(b"")
    assert sa._resolve_ephemeris(kernel) == kernel
    assert sa._resolve_ephemeris(str(kernel)) == kernel


def test_skyfield_equinox_2024():
    pytest.importorskip("skyfield")
    kernel = Path(sa._data_dir()) / sa.DEFAULT_EPHEMERIS
    if not kernel.is_file():
        pytest.skip("no local JPL kernel")
    astro = sa.SkyfieldAstronomy.load(kernel)
    assert astro.equinox_jde(2024) == pytest.approx(2460389.6302, abs=0.0005)
