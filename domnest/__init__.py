"""
domnest — DOM Nesting Checker

Static validation of element nesting in JSX / createElement syntax trees
against the HTML content model.

Trees are checked before they are ever rendered. Nothing is parsed here:
an external parser supplies ESTree JSON.
"""

__version__ = "0.1.0"
__report_version__ = "0.1.0"
