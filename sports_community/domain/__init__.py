"""Domain layer: models, field constants, repository contracts and errors."""
