"""YAML loading shared by the settings layer."""

from pathlib import Path

try:
    import yaml
except ImportError as e:
    raise ImportError("PyYAML not installed. pip install pyyaml") from e


def load_yaml_file(path: Path) -> dict:
    """
    Load and parse a YAML mapping.

    Args:
        path: Path to YAML file

    Returns:
        Parsed YAML data as dictionary (empty dict for an empty file)

    Raises:
        FileNotFoundError: If file does not exist
        ValueError: If the document is not a mapping

    Examples:
        >>> data = load_yaml_file(Path("temporalconfig.yaml"))
        >>> data['max_divisions']
        1000
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Required file not found: {path}")

    with open(path, 'r') as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping at top level of {path}, got {type(data).__name__}")
    return data


__all__ = [
    "load_yaml_file",
]
