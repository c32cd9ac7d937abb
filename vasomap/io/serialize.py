"""
JSON serialization for vessel graph datasets.
"""

import json
from pathlib import Path
from typing import Union
from ..core.store import GraphStore


SCHEMA_VERSION = "1.0"

DATA_DIR = Path(__file__).resolve().parent.parent / "data"
CORONARY_DATASET = DATA_DIR / "coronary.json"


def save_json(
    store: GraphStore,
    filepath: Union[str, Path],
    indent: int = 2,
) -> None:
    """
    Save a vessel graph snapshot to a JSON file.

    Parameters
    ----------
    store : GraphStore
        Snapshot to save
    filepath : str or Path
        Output file path
    indent : int
        JSON indentation level

    Example
    -------
    >>> from vasomap import save_json
    >>> save_json(store, "my_dataset.json")
    """
    filepath = Path(filepath)

    data = store.to_dict()

    with open(filepath, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=indent)


def load_json(filepath: Union[str, Path], verbose: bool = False) -> GraphStore:
    """
    Load a vessel graph snapshot from a JSON file.

    Parameters
    ----------
    filepath : str or Path
        Input file path
    verbose : bool
        Print a one-line summary of what was loaded

    Returns
    -------
    store : GraphStore
        Loaded snapshot

    Raises
    ------
    ValueError
        If the document declares an unsupported schema version
    DataIntegrityError
        If the records are inconsistent (see GraphStore)

    Example
    -------
    >>> from vasomap import load_json
    >>> store = load_json("my_dataset.json")
    """
    filepath = Path(filepath)

    with open(filepath, 'r', encoding='utf-8') as f:
        data = json.load(f)

    schema_version = data.get("schema_version", SCHEMA_VERSION)
    if schema_version != SCHEMA_VERSION:
        raise ValueError(f"Unsupported schema version: {schema_version}")

    store = GraphStore.from_dict(data)

    if verbose:
        print(f"Loaded {filepath.name}: {store.num_vessels} vessels, "
              f"{store.num_edges} edges, {store.num_regions} regions")

    return store


def load_coronary_dataset(verbose: bool = False) -> GraphStore:
    """
    Load the bundled coronary circulation dataset.

    Fifteen arteries from the ascending aorta down to the terminal branches of
    the LAD, LCx and RCA, with common abbreviations as aliases.

    Example
    -------
    >>> from vasomap import load_coronary_dataset
    >>> store = load_coronary_dataset()
    >>> store.find_by_name("Ascending Aorta").id
    1
    """
    return load_json(CORONARY_DATASET, verbose=verbose)
