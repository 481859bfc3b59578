"""Application layer - services and DTOs."""
