"""Version information for phrasal."""

VERSION = "0.1.0"
