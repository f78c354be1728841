"""Infer a REST API from a JSON sample and simulate it in memory."""

__version__ = '1.0.0'
