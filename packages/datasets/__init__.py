from .io import read_lines, write_lines, load_dictionary, sha256_file, describe_dictionary

__all__ = ["read_lines", "write_lines", "load_dictionary", "sha256_file", "describe_dictionary"]
