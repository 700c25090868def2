#!/usr/bin/env python3
"""
Record type shared by the intake stages.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class AnimalRecord:
    """
    One arriving animal.

    Created by the arrivals parser with an empty name; the name is filled
    in once by the assigner before the record is written to the report.
    """
    age: int
    species: str
    birth_season: str
    color: str
    weight: float
    origin: str
    name: str = ""


def trim(text: str) -> str:
    """Strip leading and trailing spaces and tabs (not other whitespace)."""
    return text.strip(" \t")


# Undecodable bytes in the input files survive a read and re-append unchanged.
ENCODING = "utf-8"
ENCODING_ERRORS = "surrogateescape"
