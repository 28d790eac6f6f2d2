"""Analysis subpackages."""
