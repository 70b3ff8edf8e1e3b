"""Application layer: request/response DTOs and one use case per operation."""
