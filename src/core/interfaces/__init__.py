"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan los clientes concretos del SDK.
- Permite invertir dependencias: el manager depende de abstracciones y los
  tests pueden pasar dobles sin red.
"""
