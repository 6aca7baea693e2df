"""Infrastructure layer — filesystem walk-up, manifest parsing, subprocesses.

This layer depends on stdlib and the domain layer.
It must never import from services, commands, or output.
The service layer bridges between domain values and infrastructure.
"""
