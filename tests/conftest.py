#
# Pytest Fixtures
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from bignotation.parser import parse_magnitude
from bignotation.table import AbbreviationTable, Entry

TABLE_TEXT = """
# Fixture table
1k = 1e3
1M = 1e6
1B = 1e9
1T = 1e12
1De = 1e33
1Qa = 1e45
1QiD = 1e48
"""


# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture
def table() -> AbbreviationTable:
    """Small abbreviation table with Qa = 1e45 and QiD = 1e48."""
    return AbbreviationTable.from_text(TABLE_TEXT)


@pytest.fixture
def parse(table):
    """Parse text with the fixture table, failing the test on a ParseFailure."""

    def _parse(text: str):
        result = parse_magnitude(text, table)
        assert result, f"could not parse {text!r}: {result}"
        return result

    return _parse


class DictLookup:
    """Minimal lookup service, only implements the protocol methods."""

    def __init__(self, *entries: Entry):
        self.by_abbreviation = {e.abbreviation.lower(): e for e in entries}
        self.by_exponent = {e.exponent: e for e in entries}

    def find_by_abbreviation(self, suffix: str):
        return self.by_abbreviation.get(suffix)

    def find_by_exponent(self, exponent: int):
        return self.by_exponent.get(exponent)


@pytest.fixture
def dict_lookup() -> DictLookup:
    return DictLookup(Entry("1Qa", 45), Entry("1k", 3))
