"""
Configuracion central.
"""
