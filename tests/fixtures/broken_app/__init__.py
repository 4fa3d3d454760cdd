"""Package whose submodule fails to import."""
