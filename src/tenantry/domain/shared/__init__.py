"""Building blocks shared by every identity domain."""
