"""
Codigo compartido entre capas: excepciones y utilidades.
"""
