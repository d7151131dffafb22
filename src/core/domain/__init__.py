"""Modelos y tipos del dominio.

Aquí viven las estructuras de datos puras (Pydantic v2) y la tabla de
servicios; el dominio no conoce httpx ni la CLI.
"""
