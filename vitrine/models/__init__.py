"""State models for the gallery grid and the lightbox."""
