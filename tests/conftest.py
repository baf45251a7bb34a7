from collections.abc import Callable
from pathlib import Path

import pytest

WHEAT_EARLY = """\
ApsimVersion = 7.10
Title = Wheat_Early
factors = Cultivar=Hartog;SowDate=15-may
Date  biomass  yield
(dd/mm/yyyy)  (kg/ha)  (kg/ha)
01/05/1990  0  ?
02/05/1990  12.5  *
03/05/1990  30.1  1500
"""

WHEAT_LATE = """\
ApsimVersion = 7.10
Title = Wheat_Late
factors = Cultivar=Hartog;SowDate=15-jun
Date  biomass  yield
(dd/mm/yyyy)  (kg/ha)  (kg/ha)
01/06/1990  0  ?
02/06/1990  8.2  900
"""

WHEAT_LAI = """\
ApsimVersion = 7.10
Title = Wheat_Lai
Date  biomass  lai
(dd/mm/yyyy)  (kg/ha)  ()
01/07/1990  3.3  0.4
"""


@pytest.fixture
def write_out_file(tmp_path: Path) -> Callable[..., Path]:
    """Write an output file into ``tmp_path`` and return its path."""

    def _write(name: str, content: str, *, folder: Path | None = None) -> Path:
        target_dir = folder or tmp_path
        target_dir.mkdir(parents=True, exist_ok=True)
        path = target_dir / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def outputs_dir(tmp_path: Path, write_out_file: Callable[..., Path]) -> Path:
    """Directory holding two output files with identical columns."""
    folder = tmp_path / "outputs"
    write_out_file("Wheat_Early.out", WHEAT_EARLY, folder=folder)
    write_out_file("Wheat_Late.out", WHEAT_LATE, folder=folder)
    return folder


@pytest.fixture
def mixed_outputs_dir(outputs_dir: Path, write_out_file: Callable[..., Path]) -> Path:
    """``outputs_dir`` plus a file with a different set of columns."""
    write_out_file("Wheat_Lai.out", WHEAT_LAI, folder=outputs_dir)
    return outputs_dir
