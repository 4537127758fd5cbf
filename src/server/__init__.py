"""HTTP server exposing orgtree parsing."""
