"""Output layer: render ServiceResults for humans or machines."""
