"""
Cliente mínimo de Airtable REST API (sin SDKs externos).

Requisitos cubiertos:
- requests
- paginación por offset (páginas estrictamente en orden)
- create / update en lotes de hasta 10 records
- sin reintentos: cualquier error se propaga al caller
"""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional
from urllib.parse import quote

import requests
from loguru import logger

from i18n_sync.core.config import AIRTABLE_MAX_BATCH_SIZE, AirtableConfig
from i18n_sync.shared.exceptions.base import AppException


class AirtableApiError(AppException):
    """Error de integración con Airtable. status_code es None si no hubo respuesta HTTP."""

    error_code = "AIRTABLE_API_ERROR"


class AirtableClient:
    """
    Cliente HTTP de Airtable para una tabla.

    Importante:
    - No hace cast de tipos de campos: devuelve el dict crudo de cada record.
    - No reintenta 429/5xx; el siguiente run del comando es el reintento.
    """

    def __init__(
        self,
        config: AirtableConfig,
        *,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._config = config
        self._table_url = (
            f"{config.api_url.rstrip('/')}/{config.base_id}/{quote(config.table_name, safe='')}"
        )
        self._timeout_s = config.timeout_s
        self._session = session or requests.Session()

    def close(self) -> None:
        self._session.close()

    def iter_records(
        self,
        *,
        view: Optional[str] = None,
        page_size: int = 100,
    ) -> Iterator[dict[str, Any]]:
        """
        Itera todos los records de la tabla (en el orden de la vista).

        - Maneja paginación por 'offset'
        - Cada record es el dict de Airtable: {"id", "createdTime", "fields"}
        """
        offset: Optional[str] = None
        page = 0

        while True:
            query: list[tuple[str, Any]] = [("pageSize", page_size)]
            if view:
                query.append(("view", view))
            if offset:
                query.append(("offset", offset))

            payload = self._request_json("GET", query=query)
            records = payload.get("records") or []
            page += 1
            logger.debug(f"Airtable página {page}: {len(records)} records")

            for rec in records:
                if not rec.get("id"):
                    # Caso raro; preferimos fallar temprano y visible.
                    raise AirtableApiError("Airtable devolvió un record sin 'id'")
                yield rec

            offset = payload.get("offset")
            if not offset:
                break

    def create_records(self, fields_list: Iterable[dict[str, Any]]) -> list[dict[str, Any]]:
        """Crea hasta 10 records. Retorna los records creados (con id)."""
        records = [{"fields": fields} for fields in fields_list]
        self._check_batch_size(records)
        payload = self._request_json("POST", json_body={"records": records})
        return payload.get("records") or []

    def update_records(self, updates: Iterable[dict[str, Any]]) -> list[dict[str, Any]]:
        """
        Actualiza hasta 10 records. Cada item: {"id": ..., "fields": {...}}.

        Usa PATCH: solo se tocan los fields enviados.
        """
        records = [{"id": u["id"], "fields": u["fields"]} for u in updates]
        self._check_batch_size(records)
        payload = self._request_json("PATCH", json_body={"records": records})
        return payload.get("records") or []

    @staticmethod
    def _check_batch_size(records: list[dict[str, Any]]) -> None:
        if not records:
            raise ValueError("El lote está vacío")
        if len(records) > AIRTABLE_MAX_BATCH_SIZE:
            raise ValueError(
                f"Airtable acepta máximo {AIRTABLE_MAX_BATCH_SIZE} records por llamada "
                f"(recibidos: {len(records)})"
            )

    def _request_json(
        self,
        method: str,
        *,
        query: Optional[list[tuple[str, Any]]] = None,
        json_body: Optional[dict[str, Any]] = None,
    ) -> dict[str, Any]:
        """
        Request HTTP contra la tabla.

        - 2xx: retorna el JSON (un cuerpo que no es objeto JSON es AirtableApiError).
        - Cualquier otro código: AirtableApiError con status_code (401, 404, 422, 429...).
        - Error de red: AirtableApiError sin status_code.
        """
        headers = {
            "Authorization": f"Bearer {self._config.api_key}",
            "Content-Type": "application/json",
        }

        try:
            resp = self._session.request(
                method=method,
                url=self._table_url,
                params=query,
                json=json_body,
                headers=headers,
                timeout=self._timeout_s,
            )
        except requests.RequestException as e:
            raise AirtableApiError(f"Error de red contra Airtable: {e}") from e

        if 200 <= resp.status_code < 300:
            try:
                payload = resp.json()
            except ValueError as e:
                raise AirtableApiError(
                    f"Airtable respondió {resp.status_code} con un cuerpo que no es JSON",
                    status_code=resp.status_code,
                ) from e
            if not isinstance(payload, dict):
                raise AirtableApiError(
                    f"Airtable respondió {resp.status_code} con JSON inesperado",
                    status_code=resp.status_code,
                )
            return payload

        raise AirtableApiError(
            f"Airtable request falló {resp.status_code}: {resp.text}",
            status_code=resp.status_code,
        )
