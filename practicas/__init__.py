"""Maximum subsequence sums, a min-heap, all-pairs shortest paths, cache experiments and shell data structures."""

__version__ = "0.1.0"