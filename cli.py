# cli.py
# Console front ends: token listing of a source file, and the symbol table with its search loop.
import argparse
import enum
import logging
import sys

from config import DEFAULT_INTERMEDIATE_NAME, LOG_FORMAT, default_keywords_path, default_operators_path
from errors import InputUnavailable, LexicalError, MalformedSymbolRequest
from lexer import Lexer, format_listing, write_intermediate
from reference_sets import ReferenceSets
from symbol_table import extract_symbols, format_table

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)


def read_source(filename) -> str:
    try:
        with open(filename, "r", encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        reason = getattr(e, 'strerror', None) or str(e)
        raise InputUnavailable(filename, reason) from e


def _prompt(prompt, read=input):
    try:
        return read(prompt)
    except EOFError:
        return None


def _read_char_reply(prompt, read=input):
    """First non-blank character of the next non-blank reply; None at end of input"""
    reply = _prompt(prompt, read)
    while reply is not None and not reply.strip():
        reply = _prompt("", read)
    return reply.strip()[0] if reply is not None else None


class SearchState(enum.Enum):
    AWAIT_QUERY = 'await_query'
    SEARCHING = 'searching'
    REPORT_RESULT = 'report_result'
    AWAIT_CONTINUE = 'await_continue'
    DONE = 'done'


def run_search_loop(table, read=input, write=print):
    """Interactive lookups until the user declines to continue. Returns the number of searches."""
    state = SearchState.AWAIT_QUERY
    query = None
    address = None
    searches = 0
    while state is not SearchState.DONE:
        match state:
            case SearchState.AWAIT_QUERY:
                query = _read_char_reply("\nEnter symbol to search: ", read)
                if query is None:
                    raise MalformedSymbolRequest()
                state = SearchState.SEARCHING
            case SearchState.SEARCHING:
                address = table.lookup(query)
                searches += 1
                state = SearchState.REPORT_RESULT
            case SearchState.REPORT_RESULT:
                if address is None:
                    write("Symbol not found.")
                else:
                    write(f"Symbol found: {query} at address {address}")
                state = SearchState.AWAIT_CONTINUE
            case SearchState.AWAIT_CONTINUE:
                reply = _read_char_reply("Do you want to search again? (y/n): ", read)
                again = reply is not None and reply.lower() == 'y'
                state = SearchState.AWAIT_QUERY if again else SearchState.DONE
    return searches


def analyze_file(filename, keywords_path=None, operators_path=None, intermediate=None, write=print):
    refs = ReferenceSets.load(keywords_path or default_keywords_path(),
                              operators_path or default_operators_path())
    source = read_source(filename)
    logger.debug("analyzing %s (%d characters) with %r", filename, len(source), refs)
    if intermediate:
        text = write_intermediate(source, intermediate)
        lexer = Lexer.from_intermediate(text, refs)
    else:
        lexer = Lexer(source, refs)
    write(format_listing(lexer.lines()))


def symbols_session(stdin=None, read=input, write=print):
    write("Enter an expression ending with $: ", end="")
    table = extract_symbols(stdin if stdin is not None else sys.stdin)
    write("\n" + format_table(table))
    run_search_loop(table, read=read, write=write)
    return table


def tokens_main(argv=None) -> int:
    ap = argparse.ArgumentParser(prog="lexanalyze", description="Token classification listing of a source file")
    ap.add_argument("file", nargs="?", help="source file (prompted for when omitted)")
    ap.add_argument("--keywords", default=None, help="keyword list, one per line")
    ap.add_argument("--operators", default=None, help="operator list, 'lexeme name' per line")
    ap.add_argument("--intermediate", metavar="PATH", default=None,
                    help=f"also write the line-marked text to PATH (e.g. {DEFAULT_INTERMEDIATE_NAME})")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging on stderr")
    args = ap.parse_args(argv)
    setup_logging(args.verbose)

    filename = args.file
    if not filename:
        filename = (_prompt("Enter the input filename: ") or "").strip()
        if not filename:
            print("error: no input filename given", file=sys.stderr)
            return 1
    try:
        analyze_file(filename, args.keywords, args.operators, args.intermediate)
    except LexicalError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


def symbols_main(argv=None) -> int:
    ap = argparse.ArgumentParser(prog="symtab", description="Symbol table of an expression read from stdin up to '$'")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging on stderr")
    args = ap.parse_args(argv)
    setup_logging(args.verbose)
    try:
        symbols_session()
    except LexicalError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(tokens_main())
