from __future__ import annotations

import pytest


def test_validate_sidereal_against_skyfield(capsys):
    pytest.importorskip("numpy")
    pytest.importorskip("skyfield")
    from skykernel.diagnostics import validate_sidereal

    rc = validate_sidereal.main(["--year-start", "1990", "--year-end", "2010", "--step-days", "365.25"])
    assert rc == 0
    out = capsys.readouterr().out
    assert "Validated" in out
