"""Domain layer: listing models and the filter engine."""
