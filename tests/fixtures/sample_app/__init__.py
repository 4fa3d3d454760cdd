"""Sample application used by the integration tests."""
