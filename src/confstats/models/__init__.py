"""Record, report and accumulator models."""
