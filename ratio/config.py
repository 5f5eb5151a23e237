"""Package-wide defaults."""

# Refinement steps used when a float is promoted to a Ratio implicitly
# (conversion constructor, mixed comparisons, derived functions).
DEFAULT_ITERATIONS = 4

# Decimal places kept when taking the reciprocal of a sub-unit remainder.
RECIPROCAL_PLACES = 3

__all__ = ["DEFAULT_ITERATIONS", "RECIPROCAL_PLACES"]
