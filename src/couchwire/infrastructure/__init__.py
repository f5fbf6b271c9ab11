"""Infrastructure layer: transport to the document-database server."""
