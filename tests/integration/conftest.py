"""Shared fixtures for catdelta integration tests.

Provides a realistic baseline catalog for an ntp + motd node and a preview
catalog compiled from a changed manifest, both written to disk as JSON so
tests can exercise the full load -> compare -> serialize pipeline.
"""

from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any

import pytest

# ---------------------------------------------------------------------------
# Catalog builders
# ---------------------------------------------------------------------------


def make_resource(
    type_: str,
    title: str,
    parameters: dict[str, Any] | None = None,
    tags: list[str] | None = None,
    file: str | None = "/etc/puppetlabs/code/environments/production/manifests/site.pp",
    line: int | None = None,
    exported: bool = False,
) -> dict[str, Any]:
    """Create a resource entry with sensible defaults for testing."""
    resource: dict[str, Any] = {
        "type": type_,
        "title": title,
        "tags": tags if tags is not None else [type_.lower(), "class", "ntp"],
        "exported": exported,
        "parameters": parameters or {},
    }
    if file is not None:
        resource["file"] = file
    if line is not None:
        resource["line"] = line
    return resource


def make_baseline_catalog() -> dict[str, Any]:
    """Baseline catalog as produced by the production environment."""
    return {
        "name": "node1.example.com",
        "version": 1700000000,
        "environment": "production",
        "resources": [
            make_resource("Stage", "main", tags=["stage"], file=None),
            make_resource("Class", "Ntp", tags=["class", "ntp"], file=None),
            make_resource(
                "Package",
                "ntp",
                {"ensure": "installed", "before": ["File[/etc/ntp.conf]"]},
                line=4,
            ),
            make_resource(
                "File",
                "/etc/ntp.conf",
                {
                    "ensure": "file",
                    "mode": "0644",
                    "owner": "root",
                    "content": "server 0.pool.ntp.org\nserver 1.pool.ntp.org\n",
                    "notify": "Service[ntp]",
                },
                line=9,
            ),
            make_resource(
                "Service",
                "ntp",
                {"ensure": "running", "enable": True, "hasstatus": True},
                line=16,
            ),
            make_resource(
                "Exec",
                "refresh-motd",
                {"command": "/usr/sbin/update-motd", "refreshonly": True, "path": ["/usr/sbin", "/usr/bin"]},
                line=22,
            ),
            make_resource(
                "User",
                "ntp",
                {"ensure": "present", "groups": ["ntp"], "managehome": False},
                line=28,
            ),
        ],
        "edges": [
            {"source": "Stage[main]", "target": "Class[Ntp]"},
            {"source": "Class[Ntp]", "target": "Package[ntp]"},
            {"source": "Class[Ntp]", "target": "File[/etc/ntp.conf]"},
            {"source": "Class[Ntp]", "target": "Service[ntp]"},
            {"source": "Class[Ntp]", "target": "Exec[refresh-motd]"},
            {"source": "Class[Ntp]", "target": "User[ntp]"},
        ],
    }


def make_preview_catalog() -> dict[str, Any]:
    """Preview catalog compiled from the changed manifest.

    Compared with the baseline:
    * Exec[refresh-motd] is gone (and so is its containment edge)
    * Cron[ntp-sync] is new (with a new containment edge)
    * File[/etc/ntp.conf] changes mode, gains a group, drops its owner and
      moves to another line
    * User[ntp] joins one more group (a compliant change)
    * Service[ntp] gains a tag
    """
    catalog = copy.deepcopy(make_baseline_catalog())
    catalog["environment"] = "future"
    catalog["version"] = 1700000500
    resources = {(r["type"], r["title"]): r for r in catalog["resources"]}

    ntp_conf = resources[("File", "/etc/ntp.conf")]
    ntp_conf["line"] = 11
    ntp_conf["parameters"]["mode"] = "0640"
    ntp_conf["parameters"]["group"] = "ntp"
    del ntp_conf["parameters"]["owner"]

    resources[("User", "ntp")]["parameters"]["groups"] = ["ntp", "adm"]
    resources[("Service", "ntp")]["tags"].append("future")

    catalog["resources"] = [r for r in catalog["resources"] if r["type"] != "Exec"]
    catalog["resources"].append(make_resource("Cron", "ntp-sync", {"command": "ntpdate -u pool.ntp.org"}, line=40))
    catalog["edges"] = [e for e in catalog["edges"] if e["target"] != "Exec[refresh-motd]"]
    catalog["edges"].append({"source": "Class[Ntp]", "target": "Cron[ntp-sync]"})
    return catalog


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def baseline_catalog() -> dict[str, Any]:
    return make_baseline_catalog()


@pytest.fixture()
def preview_catalog() -> dict[str, Any]:
    return make_preview_catalog()


@pytest.fixture()
def catalog_files(tmp_path: Path) -> tuple[Path, Path]:
    """Baseline and preview catalogs written to disk.

    The preview uses the ``{"document_type": "Catalog", "data": ...}`` wire
    envelope, the baseline a bare catalog.
    """
    baseline = tmp_path / "baseline.json"
    preview = tmp_path / "preview.json"
    baseline.write_text(json.dumps(make_baseline_catalog()), encoding="utf-8")
    preview.write_text(
        json.dumps({"document_type": "Catalog", "data": make_preview_catalog()}),
        encoding="utf-8",
    )
    return baseline, preview
