"""Date tools for the days workflow."""
