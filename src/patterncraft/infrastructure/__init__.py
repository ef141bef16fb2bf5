"""Infrastructure layer — file-backed journal.

This layer depends on stdlib and the domain error and severity
types. It must never import from services, commands, or output.
"""
