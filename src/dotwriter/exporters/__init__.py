"""Exporters for dotwriter graphs."""

from dotwriter.exporters.dot import export_dot, save_dot
from dotwriter.exporters.json_export import export_json, graph_to_json

__all__ = ["export_dot", "export_json", "graph_to_json", "save_dot"]
