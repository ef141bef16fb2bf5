"""Service layer — operations returning ServiceResult.

Services may import from domain, infrastructure, and output sinks.
They must never import from commands or the CLI.
"""
