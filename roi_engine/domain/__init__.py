"""Domain layer: parameter records and the pure projection engine."""
