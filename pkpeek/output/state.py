"""Machine-readable export of discovery results.

Produces a document with the same shape for YAML and JSON:

    pkpeek:   tool version and capture timestamp
    summary:  package counts per source
    nvm:      one entry per Node version with its packages
    pnpm:     packages from the pnpm global store
    yarn:     packages from the yarn global store
    warnings: sources that were skipped and why
"""

import json
from datetime import datetime
from typing import Any

import yaml

from .. import __version__
from ..models import AggregatedResult

FORMAT_YAML = "yaml"
FORMAT_JSON = "json"


def build_summary_section(result: AggregatedResult) -> dict[str, Any]:
    """Build the summary counts section."""
    return {
        "total_packages": result.package_count(),
        "node_versions": len(result.nvm_data),
        "by_source": {
            "nvm": sum(len(group.packages) for group in result.nvm_data),
            "pnpm": len(result.pnpm_data),
            "yarn": len(result.yarn_data),
        },
    }


def build_state(result: AggregatedResult) -> dict[str, Any]:
    """Build the complete export document for a result."""
    state: dict[str, Any] = {
        "pkpeek": {
            "version": __version__,
            "capture_timestamp": datetime.now().isoformat(),
        },
        "summary": build_summary_section(result),
    }
    state.update(result.to_dict())
    return state


def dump_state(result: AggregatedResult, output_format: str = FORMAT_YAML) -> str:
    """Serialize a result as YAML or JSON text."""
    state = build_state(result)
    if output_format == FORMAT_JSON:
        return json.dumps(state, indent=2) + "\n"
    return yaml.dump(state, default_flow_style=False, sort_keys=False, allow_unicode=True)
