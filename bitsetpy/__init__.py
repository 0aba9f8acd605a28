"""Fixed-width bit-vectors composed of machine words."""
