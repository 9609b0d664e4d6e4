"""Property based tests."""
