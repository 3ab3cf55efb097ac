"""Core: configuración, dominio y servicios (sin detalles de la CLI)."""
