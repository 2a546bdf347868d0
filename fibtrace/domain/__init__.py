"""
Domain layer package.

Contains pure business logic: the Fibonacci routine, errors
and port interfaces. No framework imports, no IO, no side effects.
"""
