#!/usr/bin/env python3
"""
Assign names from the catalog to arriving animals.
"""

from __future__ import annotations

from typing import List, Optional

import numpy as np

from zoointake.names import NameCatalog
from zoointake.records import AnimalRecord

FALLBACK_NAME = "Unnamed"


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """
    Create the random generator shared by all assignments in one run.

    Parameters
    ----------
    seed : int, optional
        Fixed seed for reproducible naming. If None, numpy seeds the
        generator from fresh OS entropy.
    """
    return np.random.default_rng(seed)


def _lookup(species: str, catalog: NameCatalog):
    names = catalog.get(species)
    if names is not None:
        return names
    # First key in catalog order wins when several differ only by case.
    wanted = species.lower()
    for key, candidates in catalog.items():
        if key.lower() == wanted:
            return candidates
    return None


def assign_name(species: str, catalog: NameCatalog, rng: np.random.Generator) -> str:
    """
    Pick a random name for one animal.

    Parameters
    ----------
    species : str
        Species as parsed from the arrivals file.
    catalog : NameCatalog
        Names per species; an exact key match is preferred over a
        case-insensitive one.
    rng : numpy.random.Generator
        Source of randomness; only consumed when a name is drawn.

    Returns
    -------
    str
        One of the catalog names, drawn uniformly, or "Unnamed" when the
        species is unknown or its list is empty.
    """
    names = _lookup(species, catalog)
    if not names:
        return FALLBACK_NAME
    return names[int(rng.integers(len(names)))]


def assign_names(
    animals: List[AnimalRecord],
    catalog: NameCatalog,
    rng: np.random.Generator,
) -> List[AnimalRecord]:
    """Set the name of every record in place and return the same list."""
    for animal in animals:
        animal.name = assign_name(animal.species, catalog, rng)
    return animals
