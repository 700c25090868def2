#!/usr/bin/env python3
"""
Helper functions for simple summaries of the population report.

Currently provides:

- population_frame: records -> pandas DataFrame with the report columns.
- read_population_frame: parse an existing report file into the same frame.
- species_table: counts, proportions and mean weight per species.
"""

# ---------------------------------------------------------------------
# Imports
# ---------------------------------------------------------------------

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Union

import numpy as np
import pandas as pd

from zoointake.records import ENCODING, AnimalRecord
from zoointake.report import REPORT_COLUMNS, SEPARATOR


# ---------------------------------------------------------------------
# 1. Building frames
# ---------------------------------------------------------------------


def population_frame(animals: Iterable[AnimalRecord]) -> pd.DataFrame:
    """
    Return a data frame with one row per animal.

    Parameters
    ----------
    animals : iterable of AnimalRecord
        Named (or not yet named) records.

    Returns
    -------
    pandas.DataFrame
        Columns in report order: name, species, age, birth_season,
        color, weight, origin.
    """
    rows = [
        [a.name, a.species, a.age, a.birth_season, a.color, a.weight, a.origin]
        for a in animals
    ]
    df = pd.DataFrame(rows, columns=REPORT_COLUMNS)
    df["age"] = df["age"].astype(int)
    df["weight"] = df["weight"].astype(float)
    return df


def read_population_frame(path: Union[str, Path]) -> pd.DataFrame:
    """
    Read an existing report file into a data frame.

    Each line must split into exactly seven fields on ", ". Free-text
    fields may themselves contain ", ", so lines that split into more
    fields are skipped by the reader, and lines with fewer fields (no
    origin) or a non-numeric age/weight are dropped afterwards.

    Parameters
    ----------
    path : str or pathlib.Path
        Location of the report file.

    Returns
    -------
    pandas.DataFrame
        Same columns as population_frame().
    """
    try:
        df = pd.read_csv(
            path,
            sep=SEPARATOR,
            engine="python",
            header=None,
            names=REPORT_COLUMNS,
            dtype=str,
            on_bad_lines="skip",
            encoding=ENCODING,
            encoding_errors="replace",
        )
    except pd.errors.EmptyDataError:
        df = pd.DataFrame(columns=REPORT_COLUMNS)

    # Short lines are padded with NaN; a missing origin means too few fields.
    df = df.dropna(subset=["origin"]).copy()
    text_columns = ["name", "species", "birth_season", "color", "origin"]
    df[text_columns] = df[text_columns].fillna("")

    # Coerce numeric columns; anything that is not a number becomes NaN.
    df["age"] = pd.to_numeric(df["age"], errors="coerce")
    df["weight"] = pd.to_numeric(df["weight"], errors="coerce")
    df = df.dropna(subset=["age", "weight"]).reset_index(drop=True)
    df["age"] = df["age"].astype(int)
    return df


# ---------------------------------------------------------------------
# 2. Summaries
# ---------------------------------------------------------------------


def species_table(data: pd.DataFrame) -> pd.DataFrame:
    """
    Return counts, proportions and mean weight for each species.

    Parameters
    ----------
    data : pandas.DataFrame
        A frame from population_frame() or read_population_frame().

    Returns
    -------
    pandas.DataFrame
        Indexed by species, sorted by descending count, with columns:
        - "count": number of animals of this species;
        - "proportion": fraction of all animals;
        - "mean_weight": average weight, rounded to two decimals.
    """
    if data.empty:
        return pd.DataFrame(
            {"count": pd.Series(dtype=int),
             "proportion": pd.Series(dtype=float),
             "mean_weight": pd.Series(dtype=float)}
        )

    # value_counts gives the frequency of each species, largest first.
    counts = data["species"].value_counts()
    props = data["species"].value_counts(normalize=True)
    mean_weight = data.groupby("species")["weight"].mean()

    table = pd.DataFrame(
        {
            "count": counts,
            "proportion": props,
            "mean_weight": np.round(mean_weight.reindex(counts.index), 2),
        }
    )
    table.index.name = "species"

    return table
