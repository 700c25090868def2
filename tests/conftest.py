import numpy as np
import pytest

NAMES_TEXT = """\
Hyena Names:
Tufted, Spotty

Lion Names:
Leo, Nala,  Simba

bear names:
Baloo
"""

ARRIVALS_TEXT = """\
4 Hyena, born in spring, brown, 42.5, savanna, east
3 Lion, born in fall, golden

2 lion, born in winter, tan, 120, desert, north
"""


@pytest.fixture
def rng():
    """Provide a seeded generator so name draws are repeatable."""
    return np.random.default_rng(11088)


@pytest.fixture
def intake_files(tmp_path):
    """Write a name pool and an arrivals file; the report does not exist yet."""
    names = tmp_path / "animalNames.txt"
    arrivals = tmp_path / "arrivingAnimals.txt"
    names.write_text(NAMES_TEXT)
    arrivals.write_text(ARRIVALS_TEXT)
    return names, arrivals, tmp_path / "newAnimals.txt"
