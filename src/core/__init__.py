"""Core: dominio, sesión, reglas de captura y configuración.

No conoce la consola ni la red; solo conceptos del problema.
"""
