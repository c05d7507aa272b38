"""Core del validador: dominio, configuración y motor de validación.

Por qué:
- El Core no conoce la CLI ni el formato de salida.
"""
