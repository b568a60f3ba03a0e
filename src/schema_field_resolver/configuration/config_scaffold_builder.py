"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "config.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Configuration template for schema-field-resolver.
# Replace every <REQUIRED> placeholder before running fields.
# Replace <OPTIONAL> placeholders only when your setup needs them.

schema:
  json_schema:
    # Provide either inline JSON schema text or a JSON schema path.
    # Relative paths are resolved against this file's directory.
    inline: "<REQUIRED>"
    # path: "<OPTIONAL>"

resolution:
  # Integer seed for reproducible anyOf/oneOf branch selection.
  # Leave unset to pick branches at random on every run.
  # seed: 42

output:
  # Flattened field list format: text or json.
  format: "text"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
