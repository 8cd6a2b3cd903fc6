"""
Repositorios de datos.
"""
