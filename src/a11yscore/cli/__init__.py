"""Command-line interface for a11yscore."""
