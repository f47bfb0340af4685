from searching.bin_search import NOT_FOUND, binary_search, generate_sorted_random_array
from searching.factorial import factorial

__all__ = ["NOT_FOUND", "binary_search", "generate_sorted_random_array", "factorial"]
