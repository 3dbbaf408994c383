from crisp.reader.parser import (
    MALFORMED_TOKEN,
    UNEXPECTED_CLOSE_PAREN,
    UNTERMINATED_LIST,
    Token,
    TokenStream,
    lex,
    read,
    read_all,
)

__all__ = [
    "MALFORMED_TOKEN",
    "UNEXPECTED_CLOSE_PAREN",
    "UNTERMINATED_LIST",
    "Token",
    "TokenStream",
    "lex",
    "read",
    "read_all",
]
