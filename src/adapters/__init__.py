"""Adaptadores de I/O (HTTP, PokeAPI).

Por qué:
- Aquí vive todo lo que habla con el exterior.
- Traducen fallos de librerías a `core.errors` para que la CLI no dependa de httpx.
"""
