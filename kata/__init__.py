"""testing-kata: small validation helpers and collaborator wrappers."""
