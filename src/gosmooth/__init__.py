"""GoSmooth travel API."""
