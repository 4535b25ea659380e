"""Application entrypoints for MirrorMind."""
