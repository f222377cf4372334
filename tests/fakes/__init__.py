"""Fakes sem IO para testes."""
