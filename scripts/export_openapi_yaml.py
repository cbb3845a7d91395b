"""Export the HTTP API's OpenAPI schema to YAML.

Usage:
  python scripts/export_openapi_yaml.py --output openapi/seo-search-box-api.yaml
"""

from __future__ import annotations

import argparse
import importlib.util
from pathlib import Path


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Export OpenAPI YAML")
    parser.add_argument(
        "--output",
        default="openapi/seo-search-box-api.yaml",
        help="Output YAML path (default: openapi/seo-search-box-api.yaml)",
    )
    return parser.parse_args()


def load_api_module():
    repo_root = Path(__file__).resolve().parent.parent
    api_index = repo_root / "api" / "index.py"
    spec = importlib.util.spec_from_file_location("seo_search_box_api_index", api_index)
    if spec is None or spec.loader is None:
        raise RuntimeError(f"Failed to load API module from {api_index}")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def main() -> int:
    args = parse_args()
    output = Path(args.output)
    output.parent.mkdir(parents=True, exist_ok=True)

    module = load_api_module()
    lines = module._dump_yaml(module.app.openapi())
    output.write_text("\n".join(lines) + "\n", encoding="utf-8")
    print(f"written: {output}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
