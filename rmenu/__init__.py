"""rmenu: type a prefix, pick an executable from PATH, launch it."""

__version__ = "0.1.0"
