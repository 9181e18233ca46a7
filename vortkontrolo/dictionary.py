"""
Loads the bundled Esperanto dictionaries.

The core never reads files. This module is the collaborator which reads
the four plain text dictionaries (prefixes, roots, suffixes, endings) from a
directory and hands their contents to MorphemeStore.load().

Usage:
    from vortkontrolo.dictionary import default_segmenter

    segmenter = default_segmenter()
    segmenter.segment("ĉiutage").render()    # 'ĉiu.tag.e'
"""
import threading
from pathlib import Path
from typing import Dict, Optional, Union

from vortkontrolo.morphemes import SOURCE_NAMES, MorphemeStore
from vortkontrolo.segmenter import Segmenter

DEFAULT_DATA_DIR = Path(__file__).parent / "data"

# Singleton instances
_store_instance: Optional[MorphemeStore] = None
_segmenter_instance: Optional[Segmenter] = None
_lock = threading.Lock()


def read_sources(data_dir: Union[str, Path] = DEFAULT_DATA_DIR) -> Dict[str, str]:
    """
    Reads <name>.txt for every dictionary from data_dir.

    Raises:
        FileNotFoundError: if the directory or one of the files is missing.
    """
    data_dir = Path(data_dir)
    if not data_dir.is_dir():
        raise FileNotFoundError(f"Dictionary directory not found: {data_dir}")

    sources = {}
    for name in SOURCE_NAMES:
        path = data_dir / f"{name}.txt"
        if not path.exists():
            raise FileNotFoundError(f"Dictionary file not found: {path}")
        with open(path, 'r', encoding='utf-8') as f:
            sources[name] = f.read()
    return sources


def load_store(data_dir: Union[str, Path] = DEFAULT_DATA_DIR) -> MorphemeStore:
    """Builds a new MorphemeStore from the dictionaries in data_dir."""
    return MorphemeStore.load(read_sources(data_dir))


def default_store() -> MorphemeStore:
    """
    Get the singleton store built from the bundled dictionaries.

    The dictionaries are read once, on first use.
    """
    global _store_instance

    with _lock:
        if _store_instance is None:
            _store_instance = load_store()
    return _store_instance


def default_segmenter() -> Segmenter:
    """Get the singleton segmenter over the bundled dictionaries."""
    global _segmenter_instance

    store = default_store()
    with _lock:
        if _segmenter_instance is None:
            _segmenter_instance = Segmenter(store)
    return _segmenter_instance


def reset_dictionary():
    """Reset singletons (mainly for testing)."""
    global _store_instance, _segmenter_instance
    with _lock:
        _store_instance = None
        _segmenter_instance = None
