"""
Application layer package.

Contains the traced request loop that orchestrates domain logic.
This layer depends on domain ports, never on infrastructure.
"""
