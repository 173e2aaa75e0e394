"""CLI package for decoding SkyAlert sensor lines."""
