"""
Integraciones externas.
"""
