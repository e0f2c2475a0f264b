"""HTTP API for the BizTax dashboard."""
