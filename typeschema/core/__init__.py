"""typeschema core: type descriptors, schema builder and the ambient stack."""
