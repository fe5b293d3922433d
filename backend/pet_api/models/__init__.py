# Models package init
"""Domain entities: Pet and the PetKind enumeration."""
