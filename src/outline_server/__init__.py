"""HTTP API exposing AXAML outlines."""
