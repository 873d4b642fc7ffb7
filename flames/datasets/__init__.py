from .validator import validate_pairs_file, pretty_summary
from .io import read_lines, read_pairs, write_pairs

__all__ = ["validate_pairs_file", "pretty_summary", "read_lines", "read_pairs", "write_pairs"]
