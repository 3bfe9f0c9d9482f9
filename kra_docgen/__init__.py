"""KRA Document Generator.

Renders P9 tax deduction cards and account statements to PDF by filling
HTML templates with values from JSON data files.
"""

__version__ = "1.0.0"
