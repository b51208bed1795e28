"""Custom GTK widgets for the Vitrine viewer."""
