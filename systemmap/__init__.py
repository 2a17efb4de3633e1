"""SystemMap - Reconstructs the hierarchy of scanned star systems."""

import importlib.metadata

try:
    __version__ = importlib.metadata.version("systemmap")
except importlib.metadata.PackageNotFoundError:
    # Package is not installed, try to read from pyproject.toml
    import os
    from pathlib import Path

    import tomli

    pyproject_path = Path(os.path.realpath(__file__)).parent.parent / "pyproject.toml"
    try:
        with open(pyproject_path, "rb") as f:
            __version__ = tomli.load(f)["project"]["version"]
    except (FileNotFoundError, KeyError):
        __version__ = "0.0.0"


from .bodies import BodyMetadata, BodySignals, BodyType, CelestialBodyRecord, TreeNode, parse_body_signals
from .display import IconScale, body_icon_size, body_label, format_body_class, mass_based_size, short_designation
from .scan_value import calculate_scan_value, estimate_scan_value
from .topology import Placement, StarSystemGroup, SystemTopology, SystemTopologyBuilder, build_system_topology

__all__ = [
    # Input records
    "CelestialBodyRecord",
    "BodyType",
    "BodyMetadata",
    # Topology
    "build_system_topology",
    "SystemTopologyBuilder",
    "SystemTopology",
    "StarSystemGroup",
    "TreeNode",
    "Placement",
    # Display helpers
    "IconScale",
    "mass_based_size",
    "body_icon_size",
    "short_designation",
    "body_label",
    "format_body_class",
    # Signals and values
    "BodySignals",
    "parse_body_signals",
    "calculate_scan_value",
    "estimate_scan_value",
]
