"""Application layer: reporter gate and stale approval audit."""
