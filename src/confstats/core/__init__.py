"""Classification and normalization helpers used by the aggregation."""
