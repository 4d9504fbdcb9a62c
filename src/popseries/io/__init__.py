"""src/popseries/io/__init__.py"""
from .readers import frame_to_series, load_seed_dataset, read_csv, read_seed_raw
from .writers import ensure_parent_dir, write_csv

__all__ = [
    "read_csv",
    "read_seed_raw",
    "frame_to_series",
    "load_seed_dataset",
    "ensure_parent_dir",
    "write_csv",
]
