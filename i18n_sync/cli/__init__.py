"""
Comandos de linea de comandos.
"""
