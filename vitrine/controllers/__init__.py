"""Controllers coordinating gallery state, the lightbox and window chrome."""
