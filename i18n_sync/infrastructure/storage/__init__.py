"""
Persistencia local de los archivos de mensajes.
"""
