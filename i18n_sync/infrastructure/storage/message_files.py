"""
Lectura, respaldo y escritura de los archivos de mensajes (en.json / zh-TW.json).

Formato en disco: objeto JSON plano key -> string, indentado con 2 espacios,
UTF-8 sin escapar caracteres no ASCII y con salto de línea final.
"""
from __future__ import annotations

import json
import os
import shutil
import tempfile
from datetime import datetime
from pathlib import Path
from typing import Optional

from loguru import logger

from i18n_sync.domain.entities.translation import TranslationMapping
from i18n_sync.shared.exceptions.sync import InvalidMessagesError, ReadError, WriteError
from i18n_sync.shared.utils.datetime_utils import DateTimeUtils


def read_messages(path: Path, *, null_as_blank: bool = True) -> TranslationMapping:
    """
    Lee un archivo de mensajes.

    Un archivo inexistente equivale a un mapping vacío (primera corrida).
    Un valor null se lee como "" salvo que null_as_blank sea False.

    Raises:
        ReadError: el archivo no se pudo leer.
        InvalidMessagesError: JSON inválido, raíz que no es objeto o valores que no son string.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return {}
    except OSError as e:
        raise ReadError(str(path), str(e)) from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise InvalidMessagesError(str(path), f"JSON inválido ({e})") from e

    if not isinstance(data, dict):
        raise InvalidMessagesError(str(path), "se esperaba un objeto JSON key -> string")

    mapping: TranslationMapping = {}
    for key, value in data.items():
        if value is None and null_as_blank:
            value = ""
        if not isinstance(value, str):
            raise InvalidMessagesError(
                str(path), f"el valor de '{key}' no es string ({type(value).__name__})"
            )
        mapping[key] = value
    return mapping


def render_messages(mapping: TranslationMapping) -> str:
    """Serializa respetando el orden de keys recibido (ya ordenado por el caller)."""
    return json.dumps(mapping, ensure_ascii=False, indent=2) + "\n"


def write_messages(path: Path, mapping: TranslationMapping) -> None:
    """
    Escribe el mapping en `path`, creando directorios si hace falta.

    Se escribe a un temporal hermano y luego os.replace, para no dejar
    un archivo truncado si el proceso muere a mitad de escritura.

    Raises:
        WriteError: ante cualquier error del sistema de archivos.
    """
    content = render_messages(mapping)
    tmp_name: Optional[str] = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{path.name}.", suffix=".tmp", dir=str(path.parent)
        )
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as fh:
            fh.write(content)
        os.replace(tmp_name, path)
        tmp_name = None
    except OSError as e:
        raise WriteError(str(path), str(e)) from e
    finally:
        if tmp_name and os.path.exists(tmp_name):
            os.unlink(tmp_name)
    logger.info(f"   ✓ Actualizado: {path.name}")


def backup_path_for(path: Path, now: Optional[datetime] = None) -> Path:
    """
    Ruta del respaldo: <nombre-sin-.json>.backup-<timestamp>.json junto al original.
    """
    stem = path.name[: -len(".json")] if path.name.endswith(".json") else path.name
    timestamp = DateTimeUtils.to_file_timestamp(now)
    return path.with_name(f"{stem}.backup-{timestamp}.json")


def backup_file(path: Path, now: Optional[datetime] = None) -> Optional[Path]:
    """
    Copia el archivo actual a un hermano con timestamp antes de sobrescribirlo.

    Returns:
        La ruta del respaldo, o None si el archivo todavía no existe.

    Raises:
        WriteError: si la copia falla (nunca se sobrescribe sin respaldo).
    """
    if not path.exists():
        return None

    backup_path = backup_path_for(path, now)
    try:
        shutil.copy2(path, backup_path)
    except OSError as e:
        raise WriteError(str(backup_path), f"no se pudo respaldar {path.name}: {e}") from e

    logger.info(f"   ✓ Respaldado: {backup_path.name}")
    return backup_path
