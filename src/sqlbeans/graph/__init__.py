"""Bean graph construction passes."""

from .arena import BeanGraph
from .builder import build_bean_graph, build_beans
from .index import CatalogIndex, build_catalog_index

__all__ = ["BeanGraph", "CatalogIndex", "build_bean_graph", "build_beans", "build_catalog_index"]
