"""
Capa de infraestructura: Airtable y archivos locales.
"""
