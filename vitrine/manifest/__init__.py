"""Manifest ingestion: parsing, bundled demo data and loading."""
