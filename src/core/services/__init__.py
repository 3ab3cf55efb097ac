"""Servicios del Core: operaciones sobre el agente."""
