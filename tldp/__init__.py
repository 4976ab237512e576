"""tldp — command-line tool over tld_parser."""

__version__ = "0.1.0"
