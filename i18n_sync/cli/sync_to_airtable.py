"""
CLI: messages/en.json, messages/zh-TW.json -> Airtable

Ejecución:
  sync-to-airtable
  sync-to-airtable --dry-run
  python -m i18n_sync.cli.sync_to_airtable --messages-dir src/messages
"""
from __future__ import annotations

from typing import Optional, Sequence

from i18n_sync.application.use_cases.push_use_cases import PushToAirtableUseCase
from i18n_sync.cli.common import build_parser, build_repository, load_settings, report_failure
from i18n_sync.core.config import build_batch_config, build_sync_paths


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser("Sube las traducciones de los archivos JSON locales a Airtable.")
    args = parser.parse_args(argv)

    client = None
    try:
        settings = load_settings(args)
        repository, client = build_repository(settings)
        use_case = PushToAirtableUseCase(
            repository,
            build_sync_paths(settings, args.messages_dir),
            build_batch_config(settings),
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
