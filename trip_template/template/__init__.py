"""Template : format fichier (schema) + export/import (parser)."""
from .schema import TemplateFile, TemplateComponent
from .parser import dumps, export_filename, load_template, parse_template

__all__ = [
    "TemplateFile",
    "TemplateComponent",
    "dumps",
    "export_filename",
    "load_template",
    "parse_template",
]
