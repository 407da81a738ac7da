"""png2flf - convert PNG font sheets to FIGlet fonts.

Example:
    $ png2flf -i sheet.png -o sheet.flf
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
