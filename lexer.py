import logging

from config import LINE_MARKER
from errors import InputUnavailable, LexicalError
from token_defs import Token, Word, CONSTANT, IDENTIFIER, KEYWORD, operator_category

logger = logging.getLogger(__name__)


def _char_stream(source):
    """Yield the characters of a string or a readable text stream one at a time"""
    if isinstance(source, str):
        yield from source
        return
    name = getattr(source, 'name', '<stream>')
    while True:
        try:
            ch = source.read(1)
        except (OSError, UnicodeDecodeError) as e:
            raise InputUnavailable(name, str(e)) from e
        if not ch:
            return
        yield ch


class Scanner:
    def __init__(self, source, terminator: str = None, marker_words: bool = False):
        self._chars = _char_stream(source)
        self.terminator = terminator      # end sentinel, symbol mode only
        self.marker_words = marker_words  # read intermediate text: LINE_MARKER words end lines
        self.ch = ''                      # current character, '' at end of input
        self.line = 1                     # current line number
        self.terminated = False           # True once the terminator was seen
        self._read_char()

    def _read_char(self):
        """Advance to the next input character"""
        if self.terminated:
            self.ch = ''
            return
        self.ch = next(self._chars, '')
        if self.terminator is not None and self.ch == self.terminator:
            self.terminated = True
            self.ch = ''

    def _is_blank(self, ch: str) -> bool:
        # newlines are line boundaries unless the markers carry them
        return ch.isspace() and (self.marker_words or ch != '\n')

    def _skip_blanks(self):
        while self.ch and self._is_blank(self.ch):
            self._read_char()

    def _read_word(self) -> str:
        chars = []
        while self.ch and not self.ch.isspace():
            chars.append(self.ch)
            self._read_char()
        return ''.join(chars)

    def words(self):
        """Lazily yield Words; every line end yields a boundary Word"""
        while True:
            self._skip_blanks()
            if self.ch == '':
                return
            if self.ch == '\n':
                yield Word(LINE_MARKER, self.line, True)
                self.line += 1
                self._read_char()
                continue
            text = self._read_word()
            if self.marker_words and text == LINE_MARKER:
                yield Word(LINE_MARKER, self.line, True)
                self.line += 1
                continue
            yield Word(text, self.line, False)

    def chars(self):
        """Yield raw characters up to the terminator (or end of input)"""
        while self.ch != '':
            yield self.ch
            if self.ch == '\n':
                self.line += 1
            self._read_char()
        if self.terminator is not None and not self.terminated:
            logger.warning("input ended before terminator %r", self.terminator)


def classify(word: str, refs):
    """Category of a word: operator, keyword, digit prefix, else identifier"""
    name = refs.operator_name(word)
    if name is not None:
        return operator_category(name)
    if refs.is_keyword(word):
        return KEYWORD
    # '12a' is still a constant: only the first character counts
    if word[:1].isdigit():
        return CONSTANT
    return IDENTIFIER


class Lexer:
    """Classified tokens of one source; the source can be consumed only once"""

    def __init__(self, source, refs, marker_words: bool = False):
        self.scanner = Scanner(source, marker_words=marker_words)
        self.refs = refs

    @classmethod
    def from_intermediate(cls, text, refs):
        """Lexer over text produced by rewrite_line_markers"""
        return cls(text, refs, marker_words=True)

    def _token(self, word: Word) -> Token:
        return Token(word.text, classify(word.text, self.refs), word.line)

    def tokens(self):
        for word in self.scanner.words():
            if not word.boundary:
                yield self._token(word)

    def lines(self):
        """Yield (line number, [Token, ...]) for every line, empty ones included"""
        line_no = 1
        current = []
        for word in self.scanner.words():
            if word.boundary:
                yield line_no, current
                line_no = word.line + 1
                current = []
                continue
            current.append(self._token(word))
        yield line_no, current


def rewrite_line_markers(source) -> str:
    """Intermediate text: every newline becomes a standalone LINE_MARKER word"""
    marker = f" {LINE_MARKER}\n"
    return ''.join(marker if ch == '\n' else ch for ch in _char_stream(source))


def write_intermediate(source, path) -> str:
    text = rewrite_line_markers(source)
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
    except OSError as e:
        raise LexicalError(f"can not write intermediate file '{path}': {e.strerror or e}") from e
    logger.info("intermediate text written to %s", path)
    return text


def format_listing(lines) -> str:
    out = ["Lexical Analysis"]
    for i, (line_no, tokens) in enumerate(lines):
        if i:
            out.append("")
        out.append(f"Line: {line_no}")
        for tok in tokens:
            out.append(f"\t{tok.lexeme}\t:\t{tok.category.name}")
    return "\n".join(out)
