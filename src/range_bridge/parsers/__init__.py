"""Parsers splitting compound constraints into atoms."""
