"""Modelos y errores del dominio.

Por qué:
- Aquí viven las estructuras de datos puras y estrictas (Pydantic v2).
- El dominio no conoce gRPC, CLI, ni SDKs: solo conceptos del problema.
"""
