"""
CLI: Airtable -> messages/en.json, messages/zh-TW.json

Ejecución:
  sync-from-airtable
  sync-from-airtable --dry-run
  python -m i18n_sync.cli.sync_from_airtable --messages-dir src/messages
"""
from __future__ import annotations

from typing import Optional, Sequence

from i18n_sync.application.use_cases.pull_use_cases import PullFromAirtableUseCase
from i18n_sync.cli.common import build_parser, build_repository, load_settings, report_failure
from i18n_sync.core.config import build_sync_paths


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser("Descarga las traducciones de Airtable a los archivos JSON locales.")
    args = parser.parse_args(argv)

    client = None
    try:
        settings = load_settings(args)
        repository, client = build_repository(settings)
        use_case = PullFromAirtableUseCase(
            repository,
            build_sync_paths(settings, args.messages_dir),
            dry_run=args.dry_run,
        )
        use_case.execute()
    except Exception as e:
        return report_failure(e)
    finally:
        if client is not None:
            client.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
