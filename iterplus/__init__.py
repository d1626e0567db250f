"""Extra iterator adaptors: intersperse, k-way merge, k-smallest, lazy grouping and chunking, group-and-fold maps, and free helpers."""

__version__ = "0.1.0"

__all__ = [
    "free",
    "groupbylazy",
    "grouping_map",
    "intersperse",
    "k_smallest",
    "kmerge",
    "lazy_buffer",
]