"""Export of the OSADL license compatibility matrix to a flat delimited file."""

__version__ = "1.0.0"
