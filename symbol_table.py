# symbol_table.py
import enum
import logging
from collections import namedtuple

from config import SYMBOL_OPERATORS, SYMBOL_TERMINATOR
from lexer import Scanner

logger = logging.getLogger(__name__)


class Address(namedtuple('Address', ['index'])):
    """Opaque synthetic address of a table entry, shown as A<index>"""
    __slots__ = ()

    def __str__(self):
        return f"A{self.index}"


class SymbolKind(enum.Enum):
    IDENTIFIER = 'Identifier'
    OPERATOR = 'Operator'


class Symbol:
    def __init__(self, character: str, address: Address):
        self.character = character
        self.address = address
        self.kind = SymbolKind.IDENTIFIER if character.isalpha() else SymbolKind.OPERATOR

    def __eq__(self, other):
        if not isinstance(other, Symbol):
            return False
        return self.character == other.character and self.address == other.address

    def __hash__(self):
        return hash((self.character, self.address))

    def __repr__(self):
        return f"Symbol(character={self.character!r}, address={self.address}, kind={self.kind.value})"


def is_symbol_char(ch: str) -> bool:
    return ch.isalpha() or (len(ch) == 1 and ch in SYMBOL_OPERATORS)


class SymbolTable:
    """Append-only table; repeated characters get separate entries"""

    def __init__(self):
        self._entries = []

    def insert(self, character: str) -> Address:
        address = Address(len(self._entries))
        symbol = Symbol(character, address)
        self._entries.append(symbol)
        logger.debug("inserted %r at %s (%s)", character, address, symbol.kind.value)
        return address

    def lookup(self, character: str):
        """Address of the first entry holding character, or None"""
        for symbol in self._entries:
            if symbol.character == character:
                return symbol.address
        return None

    @property
    def entries(self) -> tuple:
        return tuple(self._entries)

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)


def extract_symbols(source, terminator: str = SYMBOL_TERMINATOR) -> SymbolTable:
    """Insert every qualifying character read before the terminator"""
    table = SymbolTable()
    for ch in Scanner(source, terminator=terminator).chars():
        if is_symbol_char(ch):
            table.insert(ch)
    logger.info("symbol table built with %d entries", len(table))
    return table


def format_table(table: SymbolTable) -> str:
    lines = ["Symbol Table", f"{'Symbol':<8s}{'Address':<10s}Type"]
    for symbol in table:
        lines.append(f"  {symbol.character:<6s}{str(symbol.address):<10s}{symbol.kind.value}")
    return "\n".join(lines)
