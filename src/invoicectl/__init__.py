"""invoicectl — validated mutation pipeline for invoice records."""

__version__ = "0.1.0"
