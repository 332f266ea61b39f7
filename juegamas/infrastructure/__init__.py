"""Adaptadores: repositorios, gateways y servicios concretos."""
