"""Routing: path templates compiled into matchers and URL generators.

Templates are compiled once into an immutable ``CompiledRoute``; a
``Route`` wraps one and is safe to share across threads.
"""
