#!/usr/bin/env python3
"""
Parse the arriving-animals file into AnimalRecord values.

Each non-blank line holds one animal with six comma-separated fields:

    4 Hyena, born in spring, brown, 42.5, savanna, east

- Field 0: age and species ("4 Hyena")
- Field 1: birth season
- Field 2: color
- Field 3: weight
- Field 4 and 5: origin, joined by a single space

Lines that cannot be parsed are logged and skipped; they never stop the run.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable, List, Union

from zoointake.records import ENCODING, ENCODING_ERRORS, AnimalRecord, trim

logger = logging.getLogger(__name__)

FIELD_COUNT = 6

# Plain ASCII integers only; int() would also take "1_0" or non-ASCII digits.
AGE_RE = re.compile(r"[+-]?[0-9]+")


class ArrivalParseError(ValueError):
    """Base class for arrivals lines that do not produce a record."""


class MalformedRecordError(ArrivalParseError):
    """The line has fewer than six comma-separated fields."""


class UnparsableNumberError(ArrivalParseError):
    """The age or the weight field is not a number."""


def split_fields(line: str) -> List[str]:
    """
    Split a line on commas and trim every field.

    A terminating comma does not open an extra empty field, so
    "a, b," gives two fields and "a, b,," gives three.
    """
    parts = line.split(",")
    if line.endswith(","):
        parts.pop()
    return [trim(p) for p in parts]


def _parse_age_species(field: str, line: str):
    tokens = field.split(None, 1)
    if not tokens:
        raise UnparsableNumberError(f"Missing age: {line}")
    if not AGE_RE.fullmatch(tokens[0]):
        raise UnparsableNumberError(f"Invalid age {tokens[0]!r}: {line}")
    age = int(tokens[0])
    species = trim(tokens[1]) if len(tokens) > 1 else ""
    return age, species


def parse_arrival_line(line: str) -> AnimalRecord:
    """
    Parse one trimmed, non-blank arrivals line.

    Parameters
    ----------
    line : str
        The record line, without its line terminator.

    Returns
    -------
    AnimalRecord
        The parsed animal, with an empty name.

    Raises
    ------
    MalformedRecordError
        If the line has fewer than six fields.
    UnparsableNumberError
        If the age or weight cannot be parsed.
    """
    fields = split_fields(line)
    if len(fields) < FIELD_COUNT:
        raise MalformedRecordError(f"Invalid record: {line}")

    age, species = _parse_age_species(fields[0], line)

    try:
        if "_" in fields[3] or not fields[3].isascii():
            raise ValueError(fields[3])
        weight = float(fields[3])
    except ValueError:
        raise UnparsableNumberError(f"Invalid weight {fields[3]!r}: {line}") from None

    return AnimalRecord(
        age=age,
        species=species,
        birth_season=fields[1],
        color=fields[2],
        weight=weight,
        origin=fields[4] + " " + fields[5],
    )


def parse_arrivals(lines: Iterable[str]) -> List[AnimalRecord]:
    """
    Parse every record line from an iterable of text lines.

    Blank lines are skipped silently. Lines raising ArrivalParseError are
    logged as warnings and skipped.
    """
    animals: List[AnimalRecord] = []
    for raw in lines:
        line = trim(raw.rstrip("\r\n"))
        if not line:
            continue
        try:
            animals.append(parse_arrival_line(line))
        except ArrivalParseError as e:
            logger.warning("%s", e)
    return animals


def load_arrivals(path: Union[str, Path]) -> List[AnimalRecord]:
    """
    Load arriving animals from a file.

    A missing or unreadable file is logged and yields an empty list.
    """
    try:
        with open(path, encoding=ENCODING, errors=ENCODING_ERRORS) as f:
            animals = parse_arrivals(f)
    except OSError as e:
        logger.error("Error opening file: %s (%s)", path, e)
        return []

    logger.info("Parsed %d arriving animals from %s", len(animals), path)
    return animals
