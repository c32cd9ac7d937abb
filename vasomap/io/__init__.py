"""I/O functions for saving and loading vessel graph datasets."""

from .serialize import save_json, load_json, load_coronary_dataset

__all__ = ["save_json", "load_json", "load_coronary_dataset"]
