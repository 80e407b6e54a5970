"""Smoke tests for application metadata and entrypoint wiring.

Validates:
- APP_METADATA presence and basic field values
- APP_VERSION formatting
- Availability of callable main() entrypoint (without invoking GUI)
- Presence of __main__._run() wrapper
- build_orchestrator re-reading the feed list from the config file
"""

from __future__ import annotations

import json

from newsfeed_neon import store as store_module
from newsfeed_neon.__main__ import _run
from newsfeed_neon.main import APP_METADATA, APP_VERSION, build_orchestrator, main
from newsfeed_neon.models import AppMetadata, FeedDescriptor, SyncState


def test_app_metadata_instance_type() -> None:
    """APP_METADATA should be an AppMetadata dataclass."""
    assert isinstance(APP_METADATA, AppMetadata)


def test_app_metadata_basic_fields() -> None:
    """Validate core APP_METADATA field values."""
    assert APP_METADATA.name == "Newsfeed Neon"
    assert APP_METADATA.version == f"v{APP_VERSION}"
    assert "RSS/Atom" in APP_METADATA.description


def test_app_version_constant() -> None:
    """APP_VERSION should be a simple version string without the 'v' prefix."""
    assert APP_VERSION == "0.1"


def test_main_callable_without_invocation() -> None:
    """Ensure main is importable and callable (do not invoke to avoid Tk mainloop)."""
    assert callable(main)


def test_run_wrapper_callable_without_invocation() -> None:
    """Ensure __main__._run exists and is callable (do not invoke)."""
    assert callable(_run)


def test_build_orchestrator_reads_feeds_each_cycle(tmp_path, monkeypatch) -> None:
    """Feed list edits on disk are visible to the next cycle."""
    monkeypatch.setattr(store_module, "REDIS_URL", None)
    config_path = tmp_path / "config.json"
    config_path.write_text(
        json.dumps({"rss_feeds": [{"source": "A", "url": "https://a.example/rss"}]}),
        encoding="utf-8",
    )

    orchestrator = build_orchestrator(config_path)

    assert orchestrator.state is SyncState.IDLE
    assert orchestrator.feeds_provider() == [FeedDescriptor("A", "https://a.example/rss")]

    config_path.write_text(json.dumps({"rss_feeds": []}), encoding="utf-8")
    assert orchestrator.feeds_provider() == []
