"""Group trip-expense tracking and debt settlement."""
