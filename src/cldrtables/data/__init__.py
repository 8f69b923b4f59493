"""Bundled CLDR locale tables (``<Domain>_<locale>.json``)."""
