"""tests/unit/test_readers.py"""

from __future__ import annotations

import pytest

from popseries.io.readers import load_seed_dataset, read_seed_raw
from popseries.series.types import GenderedCount


def test_read_seed_raw_accepts_ksh_headers(tmp_path, write_seed_csv) -> None:
    path = write_seed_csv(
        tmp_path / "ksh.csv",
        {2001: (5349286, 4851012), 1990: (5389919, 4984904)},
        columns=("Év", "Nő", "Férfi"),
    )

    df = read_seed_raw(path)

    assert list(df.columns) == ["Year", "Female", "Male"]
    assert df["Year"].tolist() == [1990, 2001]
    assert int(df["Female"].iloc[0]) == 5389919


def test_read_seed_raw_rejects_bad_table(tmp_path, write_seed_csv) -> None:
    path = write_seed_csv(tmp_path / "bad.csv", {2001: (-5, 10)})
    with pytest.raises(ValueError, match="negative"):
        read_seed_raw(path)


def test_read_seed_raw_missing_file(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        read_seed_raw(tmp_path / "missing.csv")


def test_load_seed_dataset(tmp_path, write_seed_csv) -> None:
    path = write_seed_csv(tmp_path / "seed.csv", {2000: (10, 9), 2001: (11, 10)})

    seed = load_seed_dataset(path, country="Testland", source="unit")

    assert seed.country == "Testland"
    assert seed.source == "unit"
    assert seed.records[2001] == GenderedCount(female=11, male=10)
    assert isinstance(next(iter(seed.records)), int)
