from .validator import validate_wordlists, pretty_summary
from .io import read_lines, write_lines, load_words
from .corpus import (
    DEFAULT_ALLOWED_PATH,
    DEFAULT_ANSWERS_PATH,
    WordCorpus,
    build_corpus,
    load_corpus,
)

__all__ = [
    "validate_wordlists", "pretty_summary",
    "read_lines", "write_lines", "load_words",
    "WordCorpus", "build_corpus", "load_corpus",
    "DEFAULT_ANSWERS_PATH", "DEFAULT_ALLOWED_PATH",
]
