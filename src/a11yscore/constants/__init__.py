"""Module-level constants for a11yscore."""
