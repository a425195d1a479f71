# reference_sets.py
import logging
from types import MappingProxyType

from errors import ReferenceSetUnavailable

logger = logging.getLogger(__name__)


class ReferenceSets:
    """Static keyword set and operator lexeme -> name mapping, read-only once built"""

    def __init__(self, keywords, operators):
        self._keywords = frozenset(keywords)
        self._operators = MappingProxyType(dict(operators))

    @property
    def keywords(self) -> frozenset:
        return self._keywords

    @property
    def operators(self):
        return self._operators

    def is_keyword(self, word: str) -> bool:
        return word in self._keywords

    def operator_name(self, word: str):
        """Display name of an operator lexeme, or None"""
        return self._operators.get(word)

    def __repr__(self):
        return f"ReferenceSets(keywords={len(self._keywords)}, operators={len(self._operators)})"

    @classmethod
    def load(cls, keywords_path, operators_path):
        keywords = load_keywords(keywords_path)
        operators = load_operators(operators_path)
        return cls(keywords, operators)


def _read_lines(path):
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read().splitlines()
    except (OSError, UnicodeDecodeError) as e:
        raise ReferenceSetUnavailable(path, getattr(e, 'strerror', None) or str(e)) from e


def load_keywords(path) -> set:
    """One keyword per line, blank lines skipped"""
    keywords = set()
    for line in _read_lines(path):
        word = line.strip()
        if word:
            keywords.add(word)
    logger.debug("loaded %d keywords from %s", len(keywords), path)
    return keywords


def load_operators(path) -> dict:
    """`lexeme name` per line; a repeated lexeme keeps its first name"""
    operators = {}
    for line_no, line in enumerate(_read_lines(path), start=1):
        parts = line.split()
        if not parts:
            continue
        if len(parts) != 2:
            raise ReferenceSetUnavailable(path, f"malformed operator entry at line {line_no}: {line.strip()!r}")
        lexeme, name = parts
        if lexeme in operators:
            logger.warning("duplicate operator %r in %s (line %d) ignored", lexeme, path, line_no)
            continue
        operators[lexeme] = name
    logger.debug("loaded %d operators from %s", len(operators), path)
    return operators
