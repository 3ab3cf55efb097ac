"""Adaptadores: ficheros locales y SDK de Dialogflow."""
