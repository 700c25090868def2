#!/usr/bin/env python3
"""
Zoo intake run: name today's arrivals and update the population report.

Steps
-----
1. Load the species name pool (ZOO_NAMES_FILE).
2. Parse the arriving animals (ZOO_ARRIVALS_FILE).
3. Give each animal a random name for its species.
4. Append the named animals to the report (ZOO_REPORT_FILE).
5. Print the full report so the keeper can check it.

Usage
-----
From the directory holding the three files:

    zoo-intake

or

    python -m zoointake.run_intake

Missing input files and bad arrival lines are reported on stderr and do
not stop the run. The exit code is 1 only if the report cannot be read
back at the end.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional, TextIO, Union

import numpy as np

from zoointake.arrivals import load_arrivals
from zoointake.names import load_name_catalog
from zoointake.naming import assign_names, make_rng
from zoointake.report import append_population, echo_population
from zoointake.tables import population_frame, read_population_frame, species_table

logger = logging.getLogger(__name__)

# --------------------------------------------------------------------
# Configuration (can be overridden via environment variables)
# --------------------------------------------------------------------

# Name-pool file: "<Species> Names:" headers followed by comma-separated names.
NAMES_FILE = os.getenv("ZOO_NAMES_FILE", "animalNames.txt")

# Arrivals file: one animal per line, six comma-separated fields.
ARRIVALS_FILE = os.getenv("ZOO_ARRIVALS_FILE", "arrivingAnimals.txt")

# Population report, appended to on every run.
REPORT_FILE = os.getenv("ZOO_REPORT_FILE", "newAnimals.txt")

# Optional integer seed; unset means a fresh random draw every run.
SEED = os.getenv("ZOO_SEED")

# If set to "1", print a per-species summary after the report.
SHOW_SUMMARY = os.getenv("ZOO_SUMMARY", "0") == "1"

LOG_LEVEL = os.getenv("ZOO_LOG_LEVEL", "WARNING")


def run_intake(
    names_path: Union[str, Path],
    arrivals_path: Union[str, Path],
    report_path: Union[str, Path],
    rng: Optional[np.random.Generator] = None,
    out: Optional[TextIO] = None,
    summary: bool = False,
) -> int:
    """
    Run one intake batch.

    Parameters
    ----------
    names_path, arrivals_path, report_path : str or pathlib.Path
        The three files used by the run.
    rng : numpy.random.Generator, optional
        Generator used for every name draw. A new unseeded one is made
        if not given.
    out : text stream, optional
        Where the confirmation and the report are printed (default: stdout).
    summary : bool, default False
        Also print counts and mean weight per species, for this batch
        and for the whole report.

    Returns
    -------
    int
        Process exit code: 0 on success, 1 if the report cannot be read back.
    """
    if rng is None:
        rng = make_rng()

    catalog = load_name_catalog(names_path)
    animals = load_arrivals(arrivals_path)
    assign_names(animals, catalog, rng)

    append_population(report_path, animals)
    print("Zoo population updated successfully.", file=out)

    try:
        echo_population(report_path, out=out, heading="\nUpdated Zoo Population:")
    except OSError as e:
        logger.error("Error opening report file %s: %s", report_path, e)
        return 1

    if summary:
        batch = species_table(population_frame(animals))
        print("\nArrivals in this batch:", file=out)
        print(batch.to_string(), file=out)

        table = species_table(read_population_frame(report_path))
        print("\nAnimals per species:", file=out)
        print(table.to_string(), file=out)

    return 0


def _log_level(name: str):
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else None


def _seed(text: Optional[str]) -> Optional[int]:
    if not text:
        return None
    try:
        seed = int(text)
    except ValueError:
        seed = -1
    if seed < 0:
        logger.warning("Ignoring ZOO_SEED=%r: not a non-negative integer", text)
        return None
    return seed


def main() -> int:
    """
    Entry point for command-line use.

    Configures logging to stderr and runs the intake with the paths and
    options taken from the ZOO_* environment variables. A bad log level
    or seed is logged and replaced by WARNING or an unseeded generator.
    """
    level = _log_level(LOG_LEVEL)
    logging.basicConfig(
        level=logging.WARNING if level is None else level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if level is None:
        logger.warning("Unknown ZOO_LOG_LEVEL=%r, using WARNING", LOG_LEVEL)

    seed = _seed(SEED)

    return run_intake(
        NAMES_FILE,
        ARRIVALS_FILE,
        REPORT_FILE,
        rng=make_rng(seed),
        summary=SHOW_SUMMARY,
    )


if __name__ == "__main__":
    raise SystemExit(main())
