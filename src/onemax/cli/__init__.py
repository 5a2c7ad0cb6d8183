"""Command-line interface for the OneMax genetic algorithm."""
