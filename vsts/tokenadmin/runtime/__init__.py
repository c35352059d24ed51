"""Runtime layer: REST execution and cursor pagination."""
