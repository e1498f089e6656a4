"""
Markup Builder Generator (markupgen) Package

Generates a typed builder library for every HTML and SVG element, plus a
smoke-test module exercising every generated builder, from static catalogs
of attributes and events.

ARCHITECTURAL GUARANTEE:
------------------------
The data flows one way:

    catalogs -> composition -> element table -> backends -> output text

    - The model and the catalogs know nothing about code generation
    - The backends never look anything up; they only render the resolved table
    - Nothing is written until both artifacts have been rendered
"""

__version__ = "0.1.0"
