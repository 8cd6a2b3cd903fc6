"""
Sincronización i18n entre Airtable y los archivos de mensajes locales.

- pull: Airtable -> messages/en.json, messages/zh-TW.json
- push: messages/*.json -> Airtable (create / update por lotes)

Cada comando es una corrida batch, idempotente: se puede ejecutar N veces
sin escrituras redundantes.
"""

__version__ = "1.0.0"
