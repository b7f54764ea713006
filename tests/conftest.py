"""
conftest.py
-----------
Shared pytest fixtures for friendlog tests.

Provides fixtures for:
- Sample journal text
- Temporary journal files and log directories
- Loaded journals
"""
import pytest
from datetime import date

from friendlog.journal import FriendsJournal


# ----- Sample Journal Content Fixtures -----

@pytest.fixture
def canonical_journal_text():
    """A small journal already in canonical form."""
    return """# Friends

- Anna (a.k.a. Banana)
- Grace Hopper (a.k.a. The Admiral)
- Jean-Pierre Martin

# Activities

## March 3rd, 2024

- Lunch with @Anna and @Grace-Hopper.

## February 28th, 2024

- Called @Anna.
- Chess at @Jean-Pierre_Martin's place.

## January 10th, 2024

- Movie night with @Grace-Hopper.
"""


@pytest.fixture
def messy_journal_text():
    """The same kind of journal as a human might type it."""
    return """#   Friends

* Grace Hopper (A.K.A. The Admiral)
-   Anna   (a.k.a. Banana)


# Activities

## Jan 10, 2024
- Movie night with @the-admiral.
## march 3 2024
* Lunch with @banana and @"grace hopper".
"""


# ----- Path Fixtures -----

@pytest.fixture
def journal_path(tmp_path):
    """Path for a journal file that does not exist yet."""
    return tmp_path / "friends.md"


@pytest.fixture
def log_dir(tmp_path):
    """Temporary log directory."""
    path = tmp_path / "logs"
    path.mkdir()
    return path


@pytest.fixture
def journal_file(journal_path, canonical_journal_text):
    """Journal file holding the canonical sample journal."""
    journal_path.write_text(canonical_journal_text, encoding="utf-8")
    return journal_path


# ----- Journal Fixtures -----

@pytest.fixture
def journal(canonical_journal_text, journal_path):
    """Journal loaded from the canonical sample text."""
    return FriendsJournal.from_text(canonical_journal_text, path=journal_path)


@pytest.fixture
def empty_journal(journal_path):
    """Journal with no friends and no activities."""
    return FriendsJournal(path=journal_path)


@pytest.fixture
def sample_dates():
    """Dates used by the sample journal, most recent first."""
    return [date(2024, 3, 3), date(2024, 2, 28), date(2024, 1, 10)]
