from .io import read_lines
from .source import filter_words, load_words, choose_secret
from .validator import validate_wordlist, pretty_summary

__all__ = ["read_lines", "filter_words", "load_words", "choose_secret",
           "validate_wordlist", "pretty_summary"]
