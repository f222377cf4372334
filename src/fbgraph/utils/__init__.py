"""Utilitários compartilhados do fbgraph."""
