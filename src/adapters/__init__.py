"""I/O adapters: httpx transport, header enrichment, exporters."""
