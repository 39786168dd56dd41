from .dictionary import DictionaryError, load_dictionary, read_entries, select_words
from .validator import validate_dictionary, pretty_summary

__all__ = [
    "DictionaryError", "load_dictionary", "read_entries", "select_words",
    "validate_dictionary", "pretty_summary",
]
