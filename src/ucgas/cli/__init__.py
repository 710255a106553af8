"""Command-line front ends for ucgas."""
