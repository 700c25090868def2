#!/usr/bin/env python3
"""
Load the species name pool used to name arriving animals.

The name-pool file is organised in sections. Each section starts with a
header line such as

    Hyena Names:

and is followed by one or more lines of comma-separated names:

    Tufted, Spotty, Laughing Larry

Blank lines are ignored. Names that appear before any header are dropped.
"""

from __future__ import annotations

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple, Union

from zoointake.records import ENCODING, ENCODING_ERRORS, trim

logger = logging.getLogger(__name__)

# Only these two literal suffixes mark a header; "NAMES:" or "Names :" do not.
HEADER_SUFFIXES = ("Names:", "names:")

NameCatalog = Mapping[str, Tuple[str, ...]]


def _header_species(line: str) -> Optional[str]:
    """
    Return the species of a header line, or None for any other line.

    Parameters
    ----------
    line : str
        A line that has already been trimmed.
    """
    for suffix in HEADER_SUFFIXES:
        if line.endswith(suffix):
            return trim(line[: -len(suffix)])
    return None


def parse_name_catalog(lines: Iterable[str]) -> NameCatalog:
    """
    Build a name catalog from an iterable of text lines.

    Parameters
    ----------
    lines : iterable of str
        Raw lines, for example an open file or ``text.splitlines()``.

    Returns
    -------
    NameCatalog
        Read-only mapping from species to a tuple of names, iterated in
        sorted key order ("LION" before "Lion" before "lion"). A repeated
        header resets the list for that species.
    """
    pool: Dict[str, List[str]] = {}
    current = ""

    for raw in lines:
        line = trim(raw.rstrip("\r\n"))
        if not line:
            continue

        species = _header_species(line)
        if species is not None:
            current = species
            pool[current] = []
            continue

        # An empty species (no header yet, or a bare "Names:") collects nothing.
        if not current:
            continue
        for token in line.split(","):
            name = trim(token)
            if name:
                pool[current].append(name)

    return MappingProxyType(
        {species: tuple(names) for species, names in sorted(pool.items())}
    )


def load_name_catalog(path: Union[str, Path]) -> NameCatalog:
    """
    Load the name catalog from a file.

    A missing or unreadable file is not fatal: the error is logged and an
    empty catalog is returned, so every animal will end up "Unnamed".
    """
    try:
        with open(path, encoding=ENCODING, errors=ENCODING_ERRORS) as f:
            catalog = parse_name_catalog(f)
    except OSError as e:
        logger.error("Error opening file: %s (%s)", path, e)
        return MappingProxyType({})

    logger.info("Loaded names for %d species from %s", len(catalog), path)
    return catalog
