"""Project-agnostic libraries bundled with comptrace."""
