"""phrasal-schemas: Pydantic schemas shared across phrasal packages."""
