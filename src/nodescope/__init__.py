"""
nodescope: interactive state for graph exploration pages.

Filter, paginate and highlight the nodes of a force-directed or sankey graph,
and generate the sidebar navigation of the surrounding documentation site.
"""

__version__ = "0.1.0"
