"""phrasal command-line interface."""
