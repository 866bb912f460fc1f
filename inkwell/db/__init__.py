"""Database package - the declarative Base shared by models and migrations.

Engines and sessions live in infrastructure/database.py.
"""
