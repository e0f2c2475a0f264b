"""BizTax: tax compliance engine for Nigerian SMEs."""

__version__ = "0.1.0"
