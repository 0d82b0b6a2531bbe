"""String hashing, an open-addressing hash table, and a Boggle word finder."""

__version__ = "0.1.0"
__all__ = ["rng", "strhash", "hashtable", "boggle"]