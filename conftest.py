"""Makes the package importable when the tests run from a source checkout."""
