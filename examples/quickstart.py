"""Quickstart example for potengine.

Runs the whole pipeline for one domain in a temporary directory with the
in-process Babel catalog tool, fills in a French translation the way a
translator would, rebuilds, and formats translated messages.

Note: Examples ignore the 'errors' return value for brevity. In production,
always check errors and log/report formatting issues.
"""

import tempfile
from pathlib import Path

from babel.messages.pofile import read_po, write_po

from potengine import (
    BabelCatalogTool,
    BuildLayout,
    ConfigStore,
    LocalizationPipeline,
    MessageRecord,
    SourceLocation,
    try_format,
)
from potengine.diagnostics import MissingArgumentError

with tempfile.TemporaryDirectory() as tmp:
    root = Path(tmp)
    layout = BuildLayout(artifact_root=root / "build", source_dir=root / "po")

    # Example 1: Configure the build unit
    print("=" * 50)
    print("Example 1: Configuration")
    print("=" * 50)

    store = ConfigStore(layout, "app")
    config = store.write("app", ["fr", "en"])
    print(config)

    # Example 2: Record messages and build
    print("\n" + "=" * 50)
    print("Example 2: Build")
    print("=" * 50)

    records = [
        MessageRecord("Hello {}!", location=SourceLocation("src/main.rs", 12)),
        MessageRecord("{} file", plural="{} files", location=SourceLocation("src/fs.rs", 40)),
        MessageRecord("Hello {}!", location=SourceLocation("src/cli.rs", 7)),
    ]
    pipeline = LocalizationPipeline.from_store(store, layout, BabelCatalogTool())
    summary = pipeline.build(records)
    print(f"New template entries: {summary.merge.appended_count}")
    print(f"Synced: {dict(summary.synced)}")
    # Output: Synced: {'fr': <SyncAction.INITIALIZED: 'initialized'>, ...}

    print(layout.template_path("app").read_text(encoding="utf-8"))

    # Example 3: Translate, rebuild, and look up
    print("\n" + "=" * 50)
    print("Example 3: Translated Lookup")
    print("=" * 50)

    source = layout.catalog_source_path("fr")
    with source.open("rb") as fp:
        catalog = read_po(fp)
    catalog["Hello {}!"].string = "Bonjour {} !"
    catalog["{} file"].string = ("{} fichier", "{} fichiers")
    with source.open("wb") as fp:
        write_po(fp, catalog)

    pipeline.build([])
    catalogs = pipeline.load()

    result, _ = catalogs.translate("fr", "Hello {}!", ["Alice"])
    print(result)
    # Output: Bonjour Alice !

    result, _ = catalogs.translate_plural("fr", "{} file", "{} files", 3)
    print(result)
    # Output: 3 fichiers

    result, _ = catalogs.translate("en", "Hello {}!", ["Alice"])
    print(result)
    # Output: Hello Alice!

# Example 4: Format errors
print("\n" + "=" * 50)
print("Example 4: Format Errors")
print("=" * 50)

print(try_format("{1} before {0}", ["a", "b"]))
# Output: b before a

try:
    try_format("{} and {}", ["only one"])
except MissingArgumentError as e:
    print(f"{type(e).__name__}: {e}")
# Output: MissingArgumentError: No argument for placeholder index 1 (1 provided)
