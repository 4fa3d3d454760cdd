"""Top-level package whose name matches the generated collection parameter."""
