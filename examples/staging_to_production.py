#!/usr/bin/env python3
"""Copy Yoast meta descriptions from staging to production.

Exports every meta description from the source site, keeps a backup of the
export on disk, then imports it into the target site by slug and post type.

Usage:
    1. Create an application password for an administrator on both sites
    2. Put the settings in staging.env and production.env:
           WP_BASE_URL=https://staging.example.com
           WP_USERNAME=admin
           WP_APPLICATION_PASSWORD=xxxx xxxx xxxx xxxx
    3. Run: python staging_to_production.py
"""

import sys

from wp_meta_kit import (
    ConfigFactory,
    MetaTransferService,
    WordPressClient,
    WordPressRecordStore,
    WPMetaKitError,
)
from wp_meta_kit.utils import render_summary

SOURCE_ENV = "staging.env"
TARGET_ENV = "production.env"


def main() -> int:
    """Export from the source site and import into the target site."""
    print("Copying meta descriptions")
    print("=" * 60)

    try:
        source_config = ConfigFactory.from_env_file(SOURCE_ENV, required=True)
        target_config = ConfigFactory.from_env_file(TARGET_ENV, required=True)
    except WPMetaKitError as e:
        print(f"Configuration error: {e}")
        return 2

    # Step 1: Export from source
    print(f"\nExporting from {source_config.base_url}...")
    try:
        with WordPressClient(source_config) as client:
            service = MetaTransferService(WordPressRecordStore(client))
            export_file = service.run_export()
            service.exporter.save_to_file(export_file.content, export_file.filename)
            print(f"  Saved backup to {export_file.filename}")
    except WPMetaKitError as e:
        print(f"Export failed: {e}")
        return 1

    # Step 2: Import to target
    print(f"\nImporting to {target_config.base_url}...")
    try:
        with WordPressClient(target_config) as client:
            service = MetaTransferService(WordPressRecordStore(client))
            summary = service.run_import(export_file.content)
    except WPMetaKitError as e:
        print(f"Import failed: {e}")
        print(f"Export saved to {export_file.filename} - re-run the import once fixed.")
        return 1

    print(render_summary(summary))
    print("=" * 60)
    return 0


if __name__ == "__main__":
    sys.exit(main())
