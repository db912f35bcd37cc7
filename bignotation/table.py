"""
BigNotation Abbreviation Tables

The lookup service consumed by the parser and the formatters: pairs of a
human abbreviation ("1QaD") and the power of ten it denotes (45).

The core only depends on the AbbreviationLookup protocol, AbbreviationTable
is the stock implementation loaded from "1QaD = 1e45" text or TOML files.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Iterator, Mapping, Protocol, Self, runtime_checkable

# Third-party ----------------------------------------------------------------------------------------------------------
import toml

logger = logging.getLogger(__name__)

_LINE_RE = re.compile(r"^\s*([^=]+?)\s*=\s*([^=]+?)\s*$")
_EXPONENT_RE = re.compile(r"e\s*([+-]?\d+)", re.IGNORECASE)
_SCIENTIFIC_RE = re.compile(r"^([+-]?(?:\d+(?:\.\d+)?|\.\d+))?e([+-]?\d+)$", re.IGNORECASE)
_LEADING_ONE_RE = re.compile(r"^\s*1\s*")
_WHITESPACE_RE = re.compile(r"\s+")

DEFAULT_TABLE_PATH = Path(__file__).parent / "data" / "numbers.txt"


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class Entry:
    """Abbreviation and the power of ten it stands for, e.g. Entry("1QaD", 45)."""
    abbreviation: str
    exponent: int
    scientific: str = field(default="", compare=False)

    def __post_init__(self):
        if not isinstance(self.exponent, int) or isinstance(self.exponent, bool):
            raise TypeError(f"Entry.exponent must be an int, got {type(self.exponent).__name__}")
        if not self.scientific:
            object.__setattr__(self, 'scientific', f"1e{self.exponent}")

    @property
    def short_abbreviation(self) -> str:
        """Abbreviation without the leading "1", as used after a coefficient: 1QaD → QaD."""
        return _LEADING_ONE_RE.sub("", self.abbreviation)


@runtime_checkable
class AbbreviationLookup(Protocol):
    """Read-only lookup service required by the parser and the suffix formatter."""

    def find_by_abbreviation(self, suffix: str) -> Entry | None: ...

    def find_by_exponent(self, exponent: int) -> Entry | None: ...


class AbbreviationTable:
    """
    In-memory abbreviation table with lookup indexes and search.

    - Entries are kept sorted by exponent.
    - Abbreviation keys are normalized, both "1Qa" and "Qa" forms resolve.
    - Indexes are built in input order, a later entry replaces an earlier one with the same key.
    """

    def __init__(self, entries: Iterable[Entry] = ()) -> None:
        entries = list(entries)
        self._entries: list[Entry] = sorted(entries, key=lambda e: e.exponent)
        self._by_abbreviation: dict[str, Entry] = {}
        self._by_exponent: dict[int, Entry] = {}

        for entry in entries:
            self._by_abbreviation[normalize_query(entry.abbreviation)] = entry
            short_key = normalize_query(entry.short_abbreviation)
            if short_key:
                self._by_abbreviation[short_key] = entry

            if entry.exponent in self._by_exponent:
                logger.warning("Duplicate exponent %s: %r replaces %r",
                               entry.exponent, entry.abbreviation, self._by_exponent[entry.exponent].abbreviation)
            self._by_exponent[entry.exponent] = entry

    # ----- Constructors -----

    @classmethod
    def from_text(cls, text: str) -> Self:
        """
        Parse the plain text table format, one "abbreviation = scientific" pair per line.

        Blank lines and lines starting with '#' are skipped, so are lines
        without an '=' or without an exponent on the right-hand side.

        Example:
            # Short scale
            1k = 1e3
            1QaD = 1e45
        """
        entries = []
        for line_no, line in enumerate(str(text or "").splitlines(), start=1):
            clean = line.strip()
            if not clean or clean.startswith("#"):
                continue

            match = _LINE_RE.match(clean)
            if not match:
                logger.debug("Skipping line %d, expected 'abbreviation = scientific': %r", line_no, clean)
                continue
            abbreviation, scientific = match.group(1).strip(), match.group(2).strip()

            exp_match = _EXPONENT_RE.search(scientific)
            if not exp_match:
                logger.debug("Skipping line %d, no exponent in %r", line_no, scientific)
                continue

            entries.append(Entry(abbreviation, int(exp_match.group(1)), normalize_scientific(scientific)))

        logger.debug("Parsed %d abbreviation entries", len(entries))
        return cls(entries)

    @classmethod
    def from_toml(cls, source: str | os.PathLike[str] | Mapping[str, Any]) -> Self:
        """
        Load from TOML ``[[entry]]`` tables, or from an already decoded mapping.

        Each entry needs ``abbreviation`` and either ``exponent`` or ``scientific``:

            [[entry]]
            abbreviation = "1QaD"
            exponent = 45

        Raises:
            ValueError: "entry" is not an array of tables, or an entry lacks the abbreviation or any exponent.
        """
        data = source if isinstance(source, Mapping) else toml.load(os.fspath(source))
        items = data.get("entry", [])
        if not isinstance(items, list):
            raise ValueError(f"'entry' must be an array of tables ([[entry]]), got {type(items).__name__}")

        entries = []
        for idx, item in enumerate(items):
            if not isinstance(item, Mapping):
                raise ValueError(f"entry #{idx} must be a table, got {type(item).__name__}")
            abbreviation = item.get("abbreviation")
            if not abbreviation:
                raise ValueError(f"entry #{idx} has no abbreviation")

            scientific = item.get("scientific", "")
            exponent = item.get("exponent")
            if exponent is None:
                exp_match = _EXPONENT_RE.search(str(scientific))
                if not exp_match:
                    raise ValueError(f"entry #{idx} ({abbreviation!r}) has neither exponent nor scientific notation")
                exponent = int(exp_match.group(1))

            entries.append(Entry(str(abbreviation), int(exponent),
                                 normalize_scientific(scientific) if scientific else ""))

        logger.debug("Loaded %d abbreviation entries from TOML", len(entries))
        return cls(entries)

    @classmethod
    def from_file(cls, path: str | os.PathLike[str]) -> Self:
        """Load a ``.toml`` table or a plain text table depending on the file suffix."""
        path = Path(path)
        if path.suffix.lower() == ".toml":
            return cls.from_toml(path)
        return cls.from_text(path.read_text(encoding="utf-8"))

    @classmethod
    def default(cls) -> Self:
        """The bundled short-scale table, from 1k = 1e3 up to 1NoTg = 1e120."""
        text = DEFAULT_TABLE_PATH.read_text(encoding="utf-8")
        return cls.from_text(text)

    # ----- Lookup service -----

    def find_by_abbreviation(self, suffix: str) -> Entry | None:
        return self._by_abbreviation.get(normalize_query(suffix))

    def find_by_exponent(self, exponent: int) -> Entry | None:
        return self._by_exponent.get(exponent)

    # ----- Search -----

    def exact_match(self, query: str) -> Entry | None:
        """
        Resolve a query exactly: as an abbreviation ("QaD", "1QaD"), as an exponent
        ("45", "e45", "1e45") or as a scientific form that normalizes to one ("1E45").
        """
        query = normalize_query(query)
        if not query:
            return None

        if query in self._by_abbreviation:
            return self._by_abbreviation[query]

        exponent = _query_exponent(query)
        if exponent is None:
            exponent = _query_exponent(normalize_query(normalize_scientific(query)))
        if exponent is not None:
            return self._by_exponent.get(exponent)
        return None

    def search(self, query: str, limit: int | None = None) -> list[Entry]:
        """
        Entries whose abbreviation, scientific form or exponent contains the query,
        in exponent order. An empty query matches everything.
        """
        query = normalize_query(query)
        found = [entry for entry in self._entries if _matches(entry, query)]
        return found if limit is None else found[:limit]

    # ----- Container protocol -----

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"AbbreviationTable({len(self._entries)} entries)"


# Methods --------------------------------------------------------------------------------------------------------------

def normalize_query(raw: Any) -> str:
    """
    Normalize a lookup key: trim, remove all whitespace, lowercase.

    Examples:
        >>> normalize_query("  1 QaD ")
        '1qad'
        >>> normalize_query(None)
        ''
    """
    return _WHITESPACE_RE.sub("", str(raw or "").strip()).lower()


def normalize_scientific(text: Any) -> str:
    """
    Normalize scientific notation variants to ``<coefficient>e<exponent>``.

    Examples:
        >>> normalize_scientific("1E3")
        '1e3'
        >>> normalize_scientific("e45")
        '1e45'
        >>> normalize_scientific("about 1e45")
        '1e45'
    """
    clean = _WHITESPACE_RE.sub("", str(text or ""))
    match = _SCIENTIFIC_RE.match(clean)
    if match:
        return f"{match.group(1) or '1'}e{match.group(2)}"

    exp_match = re.search(r"e([+-]?\d+)", clean, re.IGNORECASE)
    if exp_match:
        return f"1e{exp_match.group(1)}"
    return clean


# Private methods ------------------------------------------------------------------------------------------------------

def _matches(entry: Entry, query: str) -> bool:
    if not query:
        return True

    exponent = normalize_query(str(entry.exponent))
    if query in normalize_query(entry.abbreviation):
        return True
    if query in normalize_query(entry.scientific):
        return True
    if query in exponent:
        return True
    return query.startswith("e") and query in f"e{exponent}"


def _query_exponent(query: str) -> int | None:
    """Exponent encoded by "45", "e45" or "1e45" style keys, None otherwise."""
    match = re.fullmatch(r"(?:1?e)?([+-]?\d+)", query)
    if not match:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        return None
