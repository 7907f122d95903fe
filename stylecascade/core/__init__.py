"""Resolution engine: settings cascade, style model and registry."""
