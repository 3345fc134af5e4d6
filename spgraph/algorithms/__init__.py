"""Graph search and the collaborating dynamic-programming utilities."""
