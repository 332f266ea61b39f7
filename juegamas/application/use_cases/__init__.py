"""Casos de uso: una clase por operación con un único `execute`."""
