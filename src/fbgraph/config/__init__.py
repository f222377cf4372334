"""Configuração do fbgraph: settings e logging."""
