"""Core building blocks shared by every neo-batch feature."""
