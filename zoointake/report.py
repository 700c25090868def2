#!/usr/bin/env python3
"""
Append named animals to the population report and show the result.

The report is a flat text file with one animal per line:

    name, species, age, birth season, color, weight, origin

It is only ever appended to; earlier lines are never rewritten.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional, TextIO, Union

from zoointake.records import ENCODING, ENCODING_ERRORS, AnimalRecord

logger = logging.getLogger(__name__)

SEPARATOR = ", "
REPORT_COLUMNS = ["name", "species", "age", "birth_season", "color", "weight", "origin"]


def format_weight(weight: float) -> str:
    # Six significant digits without trailing zeros: 42.5 -> "42.5", 42.0 -> "42".
    return f"{weight:g}"


def format_record(animal: AnimalRecord) -> str:
    """Render one record as a report line (without the newline)."""
    return SEPARATOR.join(
        [
            animal.name,
            animal.species,
            str(animal.age),
            animal.birth_season,
            animal.color,
            format_weight(animal.weight),
            animal.origin,
        ]
    )


def write_population(animals: Iterable[AnimalRecord], sink: TextIO) -> int:
    """
    Write one report line per animal to an open text sink.

    Returns
    -------
    int
        Number of lines written.
    """
    count = 0
    for animal in animals:
        sink.write(format_record(animal) + "\n")
        count += 1
    return count


def append_population(path: Union[str, Path], animals: Iterable[AnimalRecord]) -> bool:
    """
    Append the animals to the report file at ``path``.

    Returns
    -------
    bool
        True if the file was written, False if it could not be opened
        (the error is logged and nothing is written).
    """
    try:
        with open(path, "a", encoding=ENCODING, errors=ENCODING_ERRORS) as f:
            count = write_population(animals, f)
    except OSError as e:
        logger.error("Error opening file for writing: %s (%s)", path, e)
        return False

    logger.info("Appended %d animals to %s", count, path)
    return True


def echo_population(
    path: Union[str, Path],
    out: Optional[TextIO] = None,
    heading: Optional[str] = None,
) -> None:
    """
    Print the full report, line by line, to ``out`` (default: stdout).

    ``heading`` is printed first, once the report has been opened. Bytes
    that are not valid UTF-8 are shown as U+FFFD.

    Raises
    ------
    OSError
        If the report cannot be opened for reading.
    """
    with open(path, encoding=ENCODING, errors="replace") as f:
        if heading is not None:
            print(heading, file=out)
        for line in f:
            print(line.rstrip("\n"), file=out)
