"""NumPy-backed implementations of the domain protocols."""
