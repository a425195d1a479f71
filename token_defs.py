import enum
from collections import namedtuple


class TokenType(enum.Enum):
    KEYWORD = 'Keyword'
    OPERATOR = 'Operator'
    IDENTIFIER = 'Identifier'
    CONSTANT = 'Constant'


# type (TokenType), name (display label: "Keyword", operator name, "Identifier", "Constant")
Category = namedtuple('Category', ['type', 'name'])

# lexeme (original text), category (Category), line (line number, from 1)
Token = namedtuple('Token', ['lexeme', 'category', 'line'])

# Raw scanner output. boundary=True marks a newline; its line is the line it closes.
Word = namedtuple('Word', ['text', 'line', 'boundary'])

KEYWORD = Category(TokenType.KEYWORD, TokenType.KEYWORD.value)
IDENTIFIER = Category(TokenType.IDENTIFIER, TokenType.IDENTIFIER.value)
CONSTANT = Category(TokenType.CONSTANT, TokenType.CONSTANT.value)


def operator_category(name: str) -> Category:
    """Operator category carrying the operator's display name"""
    return Category(TokenType.OPERATOR, name)
