"""GTK views for the Vitrine viewer."""
