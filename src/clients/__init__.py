"""API clients used by the resources."""
