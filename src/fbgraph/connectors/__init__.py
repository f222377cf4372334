"""Conectores de IO do fbgraph."""
